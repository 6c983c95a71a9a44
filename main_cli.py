#!/usr/bin/env python3
"""
Main CLI Entry Point
Look up a word from the command line or start the HTTP listener
"""

import argparse
import asyncio
import json
import sys
import logging
from pathlib import Path

# Add the package to path
sys.path.insert(0, str(Path(__file__).parent))

from lookup_core.config import LookupConfig, configure_logging
from lookup_core.errors import BadRequestError
from lookup_core.lookup_service import build_lookup_service
from lookup_core.models import results_to_payload

logger = logging.getLogger(__name__)


async def run_lookup(config: LookupConfig, word: str, source_language, user_agent: str) -> int:
    service = build_lookup_service(config)
    try:
        results = await service.router.route(source_language, word, user_agent)
    except BadRequestError as e:
        print(f"[ERROR] {e.reason}", file=sys.stderr)
        return 2
    finally:
        await service.close()

    print(json.dumps(results_to_payload(results), ensure_ascii=False, indent=2))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description='Swedish word lookup proxy')
    parser.add_argument('word', nargs='?', help='Word to look up')
    parser.add_argument('--source-language', default=None, metavar='CODE',
                        help='Language of WORD (default: native Swedish)')
    parser.add_argument('--user-agent', default='word-lookup-cli/1.0',
                        help='User-Agent forwarded to upstream providers')
    parser.add_argument('--serve', action='store_true',
                        help='Start the HTTP listener on the configured host/port')
    parser.add_argument('--list-languages', action='store_true',
                        help='List supported source language codes')

    args = parser.parse_args(argv)

    config = LookupConfig.from_env()
    configure_logging(config)

    if args.list_languages:
        router = build_lookup_service(config).router
        for code in router.supported_languages():
            print(code)
        return 0

    if args.serve:
        import uvicorn
        from web_apps.lookup_web_app import create_app

        logger.info(f"Up and running on port {config.port}")
        uvicorn.run(create_app(config=config), host=config.host, port=config.port)
        return 0

    if not args.word:
        parser.print_help()
        return 2

    return asyncio.run(run_lookup(config, args.word.strip(), args.source_language,
                                  args.user_agent))


if __name__ == "__main__":
    sys.exit(main())
