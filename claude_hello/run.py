from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from claude_hello.config import load_settings
from claude_hello.invoker import ChatInvoker, format_reply
from claude_hello.llm import build_client
from claude_hello.utils.run_log import append_event, init_run_log, make_run_id


def _positive_int(raw: str) -> int:
    v = int(raw)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {v}")
    return v


def main(argv: list[str] | None = None) -> int:
    # The reply label is Korean; make sure legacy terminals don't choke on it.
    try:
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    except (AttributeError, ValueError):
        pass

    parser = argparse.ArgumentParser(
        prog="claude-hello",
        description="Send one message to the Anthropic Messages API and print the reply.",
    )
    parser.add_argument("--prompt", type=str, default=None, help="user message (default: MCP가 뭐야?)")
    parser.add_argument("--model", type=str, default=None, help="model identifier")
    parser.add_argument("--max-tokens", type=_positive_int, default=None, help="maximum output tokens")
    parser.add_argument("--log-dir", type=Path, default=None, help="write a JSONL run log into this directory")
    parser.add_argument("--no-log", action="store_true", help="do not write a run log even if one is configured")
    parser.add_argument("--verbose", action="store_true", help="print stop reason and token usage to stderr")
    args = parser.parse_args(argv)

    err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    try:
        settings = load_settings()
        overrides = {
            "prompt": args.prompt,
            "model": args.model,
            "max_tokens": args.max_tokens,
            "log_dir": args.log_dir,
        }
        settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
        client = build_client(settings)
    except ValueError as e:
        raise SystemExit(str(e)) from None

    log_paths = None
    if settings.log_dir is not None and not args.no_log:
        try:
            log_paths = init_run_log(settings.log_dir, make_run_id())
        except OSError as e:
            raise SystemExit(f"cannot create run log in {settings.log_dir}: {e}") from None

    invoker = ChatInvoker(client, settings)
    try:
        if log_paths:
            append_event(log_paths, "start", request=invoker.build_request(), extra={"backend": settings.backend})
        reply = invoker.invoke()
    except Exception as e:
        if log_paths:
            append_event(log_paths, "error", extra={"error_kind": type(e).__name__, "message": str(e)})
        raise SystemExit(str(e)) from None

    if log_paths:
        append_event(log_paths, "reply", response=reply.response)

    # Raw write: the reply reaches stdout unaltered.
    sys.stdout.write(format_reply(reply.text) + "\n")
    sys.stdout.flush()

    if args.verbose:
        usage = reply.response.usage
        err_console.print(
            f"[dim]stop_reason={reply.response.stop_reason} "
            f"input_tokens={usage.input_tokens} output_tokens={usage.output_tokens}[/dim]"
        )
        if log_paths:
            err_console.print(f"[bold]run_log[/bold]: {escape(str(log_paths.jsonl_path))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
