from __future__ import annotations

import argparse

from src.settings.settings import load_settings


def cmd_debug(config_path: str | None):
    cfg = load_settings(config_path)
    print("=== events_api DEBUG MODE ===")
    print(cfg)


def cmd_serve(config_path: str | None, host: str | None, port: int | None):
    import uvicorn

    from src.api.main import create_app
    from src.settings.logger import setup_logger

    cfg = load_settings(config_path)
    if host is not None:
        cfg.server.host = host
    if port is not None:
        cfg.server.port = port

    logger = setup_logger(log_dir=cfg.logging.log_dir, level=cfg.logging.level)
    logger.info(f"Serving events API on {cfg.server.host}:{cfg.server.port}")

    app = create_app(cfg)
    uvicorn.run(app, host=cfg.server.host, port=cfg.server.port)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="events_api")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # debug
    p_debug = subparsers.add_parser("debug", help="Print resolved config")
    p_debug.add_argument("--config", type=str, default=None)

    # serve
    p_serve = subparsers.add_parser("serve", help="Run the HTTP server")
    p_serve.add_argument("--config", type=str, default=None)
    p_serve.add_argument("--host", type=str, default=None)
    p_serve.add_argument("--port", type=int, default=None)

    args = parser.parse_args(argv)

    if args.command == "debug":
        cmd_debug(args.config)
        return

    if args.command == "serve":
        cmd_serve(args.config, args.host, args.port)
        return


if __name__ == "__main__":
    main()
