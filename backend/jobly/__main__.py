"""Entry point for ``python -m jobly``."""

import argparse
from collections.abc import Sequence

from jobly.config import settings
from jobly.utils.security import generate_token, hash_token


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m jobly", description="Jobly API server.")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the API with uvicorn.")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)

    sub.add_parser("init-db", help="Create the jobs and companies tables.")
    sub.add_parser(
        "new-admin-token",
        help="Print a fresh admin token and the JOBLY_ADMIN_TOKEN_HASH value for it.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(list(argv) if argv is not None else None)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("jobly.main:app", host=args.host, port=args.port)
    elif args.command == "init-db":
        from jobly.database import init_db
        from jobly.main import configure_logging

        configure_logging()
        init_db()
    elif args.command == "new-admin-token":
        token = generate_token()
        print(f"token: {token}")
        print(f"JOBLY_ADMIN_TOKEN_HASH={hash_token(token)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
