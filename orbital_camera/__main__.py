import logging

from orbital_camera.config import load_config, resolve_log_level


def main():
    cfg = load_config()
    logging.basicConfig(
        level=resolve_log_level(cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from orbital_camera.app import OrbitalCameraApp

    app = OrbitalCameraApp(cfg)
    app.run()

if __name__ == "__main__":
    main()
