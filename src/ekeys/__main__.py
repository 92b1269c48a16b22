from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from . import __version__
from .api.parsing import parse_sample_body
from .api.serializers import value_to_json
from .core.animation import Animation
from .core.errors import EKeysError
from .core.presets import preset_names


def _load_keyframes(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _cmd_serve(args: argparse.Namespace) -> int:
    from .runtime.server import serve

    serve(host=args.host, port=args.port, log_level=args.log_level)
    return 0


def _cmd_eval(args: argparse.Namespace) -> int:
    keyframes = _load_keyframes(args.file)
    anim = Animation(keyframes, interpolator=args.preset)

    if args.time is not None:
        print(json.dumps(value_to_json(anim.evaluate(args.time))))
        return 0

    _, times, _ = parse_sample_body({"keyframes": [], "start": args.start, "end": args.end, "count": args.count})
    values = [value_to_json(v) for v in anim.sample(times)]
    print(json.dumps({"times": times, "values": values}))
    return 0


def _cmd_presets(args: argparse.Namespace) -> int:  # noqa: ARG001
    for name in preset_names():
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    from .runtime.server import default_host, default_port

    p = argparse.ArgumentParser(prog="ekeys", description="ekeys: keyframe animation evaluator")
    p.add_argument("--version", action="version", version=f"ekeys {__version__}")
    sub = p.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the HTTP evaluation API")
    serve.add_argument("--host", default=default_host())
    serve.add_argument("--port", type=int, default=default_port())
    serve.add_argument("--log-level", default="info")
    serve.set_defaults(func=_cmd_serve)

    ev = sub.add_parser("eval", help="evaluate a JSON keyframe list")
    ev.add_argument("file", help="path to a JSON list of keyframes, or - for stdin")
    group = ev.add_mutually_exclusive_group(required=True)
    group.add_argument("--time", type=float)
    group.add_argument("--start", type=float)
    ev.add_argument("--end", type=float)
    ev.add_argument("--count", type=int)
    ev.add_argument("--preset", default=None, help="named easing curve instead of the keyframes' bezier handles")
    ev.set_defaults(func=_cmd_eval)

    presets = sub.add_parser("presets", help="list named easing curves")
    presets.set_defaults(func=_cmd_presets)
    return p


def main(argv: Sequence[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if args.command == "eval" and args.start is not None and (args.end is None or args.count is None):
        p.error("--start requires --end and --count")

    try:
        return int(args.func(args))
    except (EKeysError, ValueError, OSError) as ex:
        print(f"ekeys: error: {ex}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
