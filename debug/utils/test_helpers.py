"""
Shared test utilities and helpers for debug scripts.
"""
import sys
from typing import Any, Awaitable, Callable, List


def print_header(title: str) -> None:
    """Print a formatted test section header."""
    print("\n" + "=" * 80)
    print(f"🧪 {title}")
    print("=" * 80)


def print_test(test_name: str) -> None:
    """Print a formatted test name."""
    print(f"\n🔍 {test_name}")
    print("-" * 60)


def print_success(message: str) -> None:
    """Print a success message."""
    print(f"   ✅ {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    print(f"   ❌ {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    print(f"   ℹ️  {message}")


def print_fragments(fragments: List[Any], limit: int = 3) -> None:
    """Print the first few text fragments of a tool result."""
    for fragment in fragments[:limit]:
        for line in fragment.text.split('\n')[:10]:
            print(f"      {line}")
    if len(fragments) > limit:
        print(f"      ... {len(fragments) - limit} more fragment(s)")


def is_error_result(fragments: List[Any]) -> bool:
    """Whether a tool result is the single "Error: ..." fragment."""
    return len(fragments) == 1 and fragments[0].text.startswith("Error:")


async def safe_call(func: Callable[..., Awaitable[Any]], *args, **kwargs) -> tuple[bool, Any]:
    """Safely await a coroutine function and return (success, result)."""
    try:
        result = await func(*args, **kwargs)
        return True, result
    except Exception as e:
        return False, str(e)


def exit_with_summary(passed: int, failed: int) -> None:
    """Exit with a test summary."""
    total = passed + failed
    print(f"\n{'='*80}")
    print(f"📊 TEST SUMMARY")
    print(f"{'='*80}")
    print(f"   Total Tests: {total}")
    print(f"   ✅ Passed: {passed}")
    print(f"   ❌ Failed: {failed}")

    if failed == 0:
        print("   🎉 ALL TESTS PASSED!")
        sys.exit(0)
    else:
        print(f"   ⚠️  {failed} test(s) failed")
        sys.exit(1)
