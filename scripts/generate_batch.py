#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import List

from vocalware.client import AsyncVocalwareClient
from vocalware.config import VocalwareSettings
from vocalware.core.logging import configure_logging, get_logger
from vocalware.errors import ConfigurationError, ServiceError


def _read_lines(path: Path) -> List[str]:
    lines = [ln.strip() for ln in path.read_text(encoding="utf-8").splitlines()]
    return [ln for ln in lines if ln and not ln.startswith("#")]


async def _generate_all(*, lines: List[str], output_dir: Path, settings: VocalwareSettings) -> int:
    output_dir.mkdir(parents=True, exist_ok=True)
    log = get_logger(service="batch_gen")
    failed = 0
    async with AsyncVocalwareClient(
        settings.client_config(), timeout_seconds=settings.timeout_seconds
    ) as tts:
        for i, text in enumerate(lines, start=1):
            try:
                audio = await tts.generate(text)
            except ServiceError as e:
                failed += 1
                log.error("line_failed", line=i, reason=e.reason, details=e.details[:200])
                continue
            path = output_dir / ("%03d.%s" % (i, audio.suggested_ext))
            audio.save(path)
            log.info("line_done", line=i, path=str(path), bytes=len(audio.data))
    return failed


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate one audio file per line of a text file.")
    parser.add_argument("input", help="Text file, one utterance per line ('#' lines are skipped)")
    parser.add_argument("--output-dir", default="speech", help="Output directory (overwrites files)")
    args = parser.parse_args()

    settings = VocalwareSettings()
    configure_logging(settings.log_level)
    log = get_logger(service="batch_gen")

    lines = _read_lines(Path(args.input))
    log.info("generating", dir=args.output_dir, count=len(lines))
    try:
        failed = asyncio.run(
            _generate_all(lines=lines, output_dir=Path(args.output_dir), settings=settings)
        )
    except ConfigurationError as e:
        log.error("bad_configuration", detail=str(e), hint="Set VOCALWARE_* in .env")
        return 2

    log.info("generation_complete", dir=args.output_dir, failed=failed)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
