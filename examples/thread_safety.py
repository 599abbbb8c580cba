"""Thread Safety Example - Per-Worker AffixResolver Usage.

This example shows the recommended patterns for resolving affixes in
multi-threaded applications.

Thread Safety:
    AffixResolver is NOT synchronized. Each worker owns one resolver and
    passes it explicitly to resolve()/apply(). AffixSpec, SymbolTable and
    ResolvedResult are immutable values and may be shared freely.

Demonstrates:
1. One resolver per worker in a thread pool
2. Sharing resolved results between threads
3. Snapshotting a mutable settings object before handing it to workers

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from numaffix import AffixResolver, AffixSpec, ModifierHolder, SymbolTable


# Example 1: One resolver per worker (RECOMMENDED)
def example_1_resolver_per_worker() -> None:
    """Example 1: Each worker creates its resolver once and reuses it."""
    print("=" * 60)
    print("Example 1: One Resolver per Worker")
    print("=" * 60)

    spec = AffixSpec(positive_suffix_pattern="%", negative_suffix_pattern="%")
    tables = {
        "root": SymbolTable(),
        "arabic": SymbolTable(percent_sign="٪", minus_sign="؜-"),
    }

    def worker(name: str) -> str:
        resolver = AffixResolver()
        holder = ModifierHolder()
        for value in (12, -12, 7, -7):
            holder.clear()
            resolver.apply(value, holder, tables[name], spec)
        return (
            f"[{threading.current_thread().name}] {name}: {holder.apply_all('7')} "
            f"(parse_count={resolver.parse_count})"
        )

    with ThreadPoolExecutor(max_workers=2) as pool:
        for line in pool.map(worker, tables):
            print(f"  {line}")


# Example 2: Shared results
def example_2_shared_results() -> None:
    """Example 2: Resolve once, hand the immutable result to many threads."""
    print("\n" + "=" * 60)
    print("Example 2: Sharing ResolvedResult")
    print("=" * 60)

    result = AffixResolver().resolve(
        AffixSpec(negative_prefix_pattern="(", negative_suffix_pattern=")"), SymbolTable()
    )

    def render(value: int) -> str:
        return result.modifier.select(value).apply(str(abs(value)))

    with ThreadPoolExecutor(max_workers=4) as pool:
        print(f"  {list(pool.map(render, [5, -5, 0, -10]))}")


# Example 3: Snapshot before sharing
def example_3_snapshot() -> None:
    """Example 3: Snapshot mutable settings into an AffixSpec first."""
    print("\n" + "=" * 60)
    print("Example 3: Snapshotting Mutable Settings")
    print("=" * 60)

    class Settings:
        negative_suffix_pattern: str | None = "-"
        always_show_plus_sign = True

    settings = Settings()
    spec = AffixSpec.from_properties(settings)
    settings.negative_suffix_pattern = None  # later edits do not leak into spec

    resolver = AffixResolver()
    result = resolver.resolve(spec, SymbolTable())
    print(f"  positive={result.positive} negative={result.negative}")


# Main execution
if __name__ == "__main__":
    example_1_resolver_per_worker()
    example_2_shared_results()
    example_3_snapshot()

    print("\n" + "=" * 60)
    print("[SUCCESS] All thread safety examples complete!")
    print("=" * 60)
