from tristate import Aberration, Failed, Retryable, Succeeded


def test_map_transforms_succeeded_payload() -> None:
    assert Succeeded(5).map(lambda x: x + 1) == Succeeded(6)


def test_map_passes_other_arms_through_unchanged() -> None:
    retryable = Retryable("busy")
    failed = Failed("gone")

    assert retryable.map(lambda x: x + 1) is retryable
    assert failed.map(lambda x: x + 1) is failed


def test_map_retryable_and_map_failed_touch_only_their_arm() -> None:
    assert Retryable("busy").map_retryable(str.upper) == Retryable("BUSY")
    assert Succeeded(1).map_retryable(str.upper) == Succeeded(1)
    assert Failed("gone").map_failed(len) == Failed(4)
    assert Retryable("busy").map_failed(len) == Retryable("busy")


def test_map_all_applies_only_the_active_function() -> None:
    calls = []

    def record(name):
        def apply(value):
            calls.append(name)
            return f"{name}:{value}"

        return apply

    result = Retryable(7).map_all(record("s"), record("m"), record("f"))

    assert result == Retryable("m:7")
    assert calls == ["m"]


def test_map_all_covers_every_arm() -> None:
    functions = (lambda s: s * 2, lambda m: m.upper(), len)

    assert Succeeded(2).map_all(*functions) == Succeeded(4)
    assert Retryable("busy").map_all(*functions) == Retryable("BUSY")
    assert Failed("gone").map_all(*functions) == Failed(4)


def test_map_or_uses_default_for_non_success() -> None:
    assert Succeeded(2).map_or(0, lambda x: x * 10) == 20
    assert Retryable("busy").map_or(0, lambda x: x * 10) == 0
    assert Failed("gone").map_or(0, lambda x: x * 10) == 0


def test_map_or_else_receives_an_aberration() -> None:
    seen = []

    def fallback(aberration):
        seen.append(aberration)
        return -1

    assert Succeeded(2).map_or_else(fallback, lambda x: x) == 2
    assert Retryable("busy").map_or_else(fallback, lambda x: x) == -1
    assert Failed("gone").map_or_else(fallback, lambda x: x) == -1
    assert seen == [Aberration.Retryable("busy"), Aberration.Failed("gone")]
