"""CLI interface for word-diff — designed to be called by an editor.

Usage:
    # Diff (stdin: {"old": ..., "new": ..., "offset": ...}, stdout: edits JSON)
    echo '{"old": "foo bar baz", "new": "foo qux baz"}' | \
        python -m word_diff.cli diff

    # Diff two files
    python -m word_diff.cli diff --old-file a.txt --new-file b.txt

    # Show tokens (stdin: text, stdout: token JSON)
    printf 'a == b' | python -m word_diff.cli tokenize

    # Apply edits (stdin: {"text": ..., "edits": [...], "offset": 0, "unit": "byte"})
    python -m word_diff.cli apply < request.json
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

from .config import create_differ, load_config, load_from_yaml
from .differ import WordDiffer, apply_edits
from .types import UNITS, EditScript

logger = logging.getLogger(__name__)


def _build_differ(args: argparse.Namespace) -> WordDiffer:
    config = load_from_yaml(args.config) if args.config else load_config({})
    if args.ignore_punctuation:
        config["ignore_punctuation"] = True
    if args.unit:
        config["unit"] = args.unit
    return create_differ(config)


def _read_text(path: str) -> str:
    return Path(path).expanduser().read_text(encoding="utf-8")


def _read_request() -> dict:
    request = json.loads(sys.stdin.read())
    if not isinstance(request, dict):
        raise ValueError("request must be a JSON object")
    return request


def cmd_diff(args: argparse.Namespace) -> None:
    """Diff old/new text from files or a JSON request on stdin."""
    differ = _build_differ(args)

    if args.old_file or args.new_file:
        old = _read_text(args.old_file) if args.old_file else ""
        new = _read_text(args.new_file) if args.new_file else ""
        offset = args.offset
    else:
        request = _read_request()
        old = request.get("old", "")
        new = request.get("new", "")
        offset = int(request.get("offset", args.offset))

    script = differ.diff(old, new, offset)

    output = {
        "unit": script.unit,
        "offset": offset,
        "edits": script.to_list(),
    }
    json.dump(output, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_tokenize(args: argparse.Namespace) -> None:
    """Print the tokens of stdin text."""
    differ = _build_differ(args)
    text = sys.stdin.read()

    tokens = [
        {
            "text": t.text,
            "start": t.start,
            "end": t.end,
            "kind": differ.classifier.kind(t.text[0]).name.lower() if t.text else None,
        }
        for t in differ.tokenize(text)
    ]
    json.dump(tokens, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_apply(args: argparse.Namespace) -> None:
    """Apply an edit script from stdin JSON and print the new text."""
    request = _read_request()
    unit = request.get("unit", args.unit or "byte")
    script = EditScript.from_list(request.get("edits", []), unit=unit)
    sys.stdout.write(apply_edits(request.get("text", ""), script, int(request.get("offset", 0))))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="word_diff",
        description="Word-granularity edit scripts between two texts",
    )
    parser.add_argument("--config", default=None, help="YAML config path")
    parser.add_argument("--ignore-punctuation", action="store_true", help="Treat punctuation as word characters")
    parser.add_argument("--unit", choices=UNITS, default=None, help="Position unit for ranges")
    parser.add_argument("--verbose", action="store_true", help="Debug logging to stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    p_diff = sub.add_parser("diff", help="Diff texts (JSON stdin or files)")
    p_diff.add_argument("--old-file", default=None, help="Original text file")
    p_diff.add_argument("--new-file", default=None, help="New text file")
    p_diff.add_argument("--offset", type=int, default=0, help="Base offset added to every range")
    sub.add_parser("tokenize", help="Show tokens of stdin text")
    sub.add_parser("apply", help="Apply edits (JSON stdin)")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    cmds = {
        "diff": cmd_diff,
        "tokenize": cmd_tokenize,
        "apply": cmd_apply,
    }
    try:
        cmds[args.command](args)
    except (ValueError, OSError) as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        sys.stderr.write(f"word_diff: {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
