"""``linkroute resolve`` — dry-run a link through the full pipeline.

Navigation calls are printed instead of performed, prefetches run against
an in-memory cache, and the analytics report is printed at the end.
"""

import argparse

import anyio

from linkroute.analytics import DeepLinkAnalytics, LinkSource
from linkroute.resolver import LinkResolver
from linkroute.testing import RecordingNavigator, make_context


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` and print navigation plus the analytics report.

    Exits with status 1 when resolution did not complete cleanly.
    """
    navigator = RecordingNavigator(echo=lambda line: print(f"-> {line}"))
    context = make_context(is_authenticated=not args.anonymous, navigator=navigator)
    resolver = LinkResolver(context, DeepLinkAnalytics.from_config(context.config))

    success = anyio.run(resolver.resolve, args.url, LinkSource(args.source))

    print(f"result: {'ok' if success else 'failed'}")
    print(resolver.analytics.generate_report())
    if not success:
        raise SystemExit(1)
