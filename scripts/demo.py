#!/usr/bin/env python3
"""
Demo script for the actions cache client.

Prints cache usage and the caches of a repository, largest first.
Usage: python scripts/demo.py OWNER/REPO [REF]

Set GH_TOKEN for private repositories or to raise the rate limit.
"""

import logging
import sys

from actions_cache import ActionsCacheError, CacheQuery, CacheQueryService, RepositoryRef

DEMO_VERSION = "0.1.0"


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def human_size(size_in_bytes: float) -> str:
    """Format a byte count for display."""
    for unit in ("B", "KB", "MB", "GB"):
        if size_in_bytes < 1024:
            return f"{size_in_bytes:.1f} {unit}"
        size_in_bytes /= 1024
    return f"{size_in_bytes:.1f} TB"


def demo_usage(service: CacheQueryService) -> None:
    """Show the repository cache usage."""
    print_section(f"Cache usage for {service.repo.full_name}")

    usage = service.get_usage_details()
    print(f"\n  Active caches: {usage.active_caches_count}")
    print(f"  Total size:    {human_size(usage.active_caches_size_in_bytes)}")


def demo_list(service: CacheQueryService, ref: str | None) -> None:
    """List every cache, following pagination."""
    print_section(f"Caches{' on ' + ref if ref else ''}")

    query = CacheQuery(ref=ref, sort="size_in_bytes", direction="desc")
    caches = service.list_all_caches(query)

    for cache in caches:
        print(
            f"  {cache.key[:48]:<48} {human_size(cache.size_in_bytes):>10}  "
            f"{cache.ref}  {cache.last_accessed_at:%Y-%m-%d %H:%M}"
        )
    print(f"\n  {len(caches)} caches")


def main() -> int:
    """Run the demo."""
    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    args = [arg for arg in sys.argv[1:] if arg != "-v"]
    repo = RepositoryRef.parse(args[0])
    ref = args[1] if len(args) > 1 else None

    try:
        with CacheQueryService.create(repo, command="demo", version=DEMO_VERSION) as service:
            demo_usage(service)
            demo_list(service, ref)
    except ActionsCacheError as e:
        print(f"\n✗ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
