"""CLI утилита (подпись/проверка зарплаты офлайн, запуск сервера)."""

import argparse
import sys

from hmac_auth.services.employee import is_blank
from hmac_auth.services.hmac_codec import HmacCodec
from hmac_auth.settings import get_settings


def _codec(args: argparse.Namespace) -> HmacCodec:
    secret = args.secret if args.secret is not None else get_settings().hmac_secret
    return HmacCodec(key=secret)


def cmd_sign(args: argparse.Namespace) -> int:
    """Печатает HMAC-SHA256 зарплаты (hex)."""
    if is_blank(args.salary):
        print("Зарплата не может быть пустой", file=sys.stderr)
        return 2
    try:
        codec = _codec(args)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    print(codec.compute(args.salary))
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Печатает `true`/`false`; код выхода 0 только при совпадении."""
    try:
        codec = _codec(args)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    ok = codec.verify(args.salary, args.hmac)
    print("true" if ok else "false")
    return 0 if ok else 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Запускает HTTP сервер (uvicorn)."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hmac_auth.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_config=None,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Точка входа CLI."""
    parser = argparse.ArgumentParser(prog="hmac-auth", description="HMAC Auth: CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_sign = sub.add_parser("sign", help="Посчитать HMAC зарплаты")
    p_sign.add_argument("--salary", required=True, help="Зарплата (как текст)")
    p_sign.add_argument("--secret", default=None, help="Секрет (по умолчанию HMAC_SECRET)")
    p_sign.set_defaults(func=cmd_sign)

    p_verify = sub.add_parser("verify", help="Проверить HMAC зарплаты")
    p_verify.add_argument("--salary", required=True, help="Зарплата (как текст)")
    p_verify.add_argument("--hmac", required=True, help="Ожидаемый HMAC (lowercase hex)")
    p_verify.add_argument("--secret", default=None, help="Секрет (по умолчанию HMAC_SECRET)")
    p_verify.set_defaults(func=cmd_verify)

    p_serve = sub.add_parser("serve", help="Запустить HTTP сервер")
    p_serve.add_argument("--host", default=None, help="Адрес (по умолчанию HOST)")
    p_serve.add_argument("--port", type=int, default=None, help="Порт (по умолчанию PORT)")
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
