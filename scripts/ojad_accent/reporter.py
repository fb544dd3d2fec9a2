"""Summaries of collected word records."""

from collections import Counter
from typing import Dict, List

from .models import WordRecord


def summarize(words: List[WordRecord]) -> Dict:
    """Compute summary statistics for a set of records.

    Returns:
        Dict with total, heiban count, average mora count and counts by
        part of speech and by accent position.
    """
    total = len(words)
    if total == 0:
        return {}

    heiban = sum(1 for w in words if w.is_heiban)

    return {
        "total": total,
        "unique": len(set(words)),
        "heiban": heiban,
        "accented": total - heiban,
        "avg_morae": sum(w.mora_count for w in words) / total,
        "by_pos": dict(Counter(w.part_of_speech or "(none)" for w in words)),
        "by_accent": dict(Counter(w.accent_idx for w in words)),
    }


def print_summary(words: List[WordRecord]) -> Dict:
    """Print summary statistics to console.

    Returns:
        Dict with summary statistics.
    """
    summary = summarize(words)
    if not summary:
        print("No records to summarize.")
        return summary

    total = summary["total"]
    heiban = summary["heiban"]
    accented = summary["accented"]

    print("\n" + "=" * 50)
    print("OJAD Accent Summary")
    print("=" * 50)

    print(f"\nTotal records: {total:,} ({summary['unique']:,} unique)")
    print(f"Average morae: {summary['avg_morae']:.2f}")
    print()

    print("Accent:")
    print(f"  Heiban (0):   {heiban:>6,} ({heiban/total*100:>5.1f}%)")
    print(f"  Accented:     {accented:>6,} ({accented/total*100:>5.1f}%)")

    print("\nPart of speech:")
    for pos, count in sorted(summary["by_pos"].items(), key=lambda x: -x[1]):
        print(f"    {pos}: {count:,}")

    print()

    return summary
