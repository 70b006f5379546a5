import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

# registered (description, function) pairs, consumed by run()
_registered: List[Dict[str, Any]] = []

GREEN, RED, GREY, RESET = '\033[92m', '\033[91m', '\033[90m', '\033[0m'


class TestAssertionError(AssertionError):
    """raised by the assert helpers so the runner can tell failures from crashes."""
    __test__ = False


def test(description: str) -> Callable:
    """decorator registering a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _registered.append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# the registration decorator itself is not a test case
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    if actual != expected:
        raise TestAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def assert_raises(exc_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "expected an exception") -> BaseException:
    """calls func and returns the raised exception, failing if none of exc_type was raised."""
    try:
        func()
    except exc_type as e:
        return e
    raise TestAssertionError(f"{message}: {exc_type.__name__} not raised")


def run(title: str = "test run") -> bool:
    """runs and clears every registered test; True when all passed."""
    print(f"\n--- {title} ---")
    start_time = time.perf_counter()
    failures = 0

    for item in _registered:
        try:
            item['func']()
            print(f"  {GREEN}pass{RESET}  {item['description']}")
        except Exception as e:
            failures += 1
            kind = "assertion failed" if isinstance(e, TestAssertionError) else type(e).__name__
            print(f"  {RED}fail{RESET}  {item['description']}")
            print(f"    {GREY}-> {kind}: {e}{RESET}")

    total = len(_registered)
    _registered.clear()
    duration = (time.perf_counter() - start_time) * 1000
    color = GREEN if failures == 0 else RED
    print(f"\n{color}{total - failures}/{total} passed{RESET} in {duration:.2f}ms")
    return failures == 0
