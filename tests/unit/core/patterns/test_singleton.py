"""Tests for the context-scoped singleton base class."""

import pytest

from scoped_config.core.context import execution_context, get_current_context
from scoped_config.core.exceptions import DirectInstantiationError
from scoped_config.core.patterns import ContextScopedSingleton


class Counter(ContextScopedSingleton):
    """Counts how many times it was initialized or cleaned up."""

    initializations = 0
    cleanups = 0

    def _initialize(self):
        type(self).initializations += 1
        self.hits = 0

    def _cleanup(self):
        type(self).cleanups += 1


class Other(ContextScopedSingleton):
    pass


@pytest.fixture(autouse=True)
def reset_counters():
    Counter.initializations = 0
    Counter.cleanups = 0


class TestGetInstance:

    def test_lazy_creation(self):
        """Nothing is built until the first lookup."""
        with execution_context():
            assert Counter.has_instance() is False
            assert Counter.initializations == 0

            Counter.get_instance()

            assert Counter.has_instance() is True
            assert Counter.initializations == 1

    def test_same_instance_within_context(self):
        with execution_context():
            instances = [Counter.get_instance() for _ in range(5)]

        assert all(i is instances[0] for i in instances)
        assert Counter.initializations == 1

    def test_state_persists_within_context(self):
        with execution_context():
            Counter.get_instance().hits += 1
            Counter.get_instance().hits += 1
            assert Counter.get_instance().hits == 2

    def test_new_instance_per_context(self):
        with execution_context():
            first = Counter.get_instance()
        with execution_context():
            second = Counter.get_instance()

        assert first is not second
        assert Counter.initializations == 2

    def test_subclasses_do_not_share_slots(self):
        with execution_context() as ctx:
            counter = Counter.get_instance()
            other = Other.get_instance()

            assert counter is not other
            assert isinstance(other, Other)
            assert len(ctx) == 2

    def test_ambient_context_used_without_scope(self):
        assert get_current_context() is None

        instance = Counter.get_instance()

        assert get_current_context() is not None
        assert Counter.get_instance() is instance


class TestDirectInstantiation:

    def test_direct_call_rejected(self):
        with pytest.raises(DirectInstantiationError) as exc_info:
            Counter()

        assert exc_info.value.class_name == "Counter"
        assert "get_instance" in exc_info.value.message
        assert Counter.initializations == 0

    def test_forged_token_rejected(self):
        with pytest.raises(DirectInstantiationError):
            Counter(object())

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            Other()


class TestResetInstance:

    def test_reset_runs_cleanup_and_rebuilds(self):
        with execution_context():
            first = Counter.get_instance()
            Counter.reset_instance()

            assert Counter.cleanups == 1
            assert Counter.has_instance() is False

            second = Counter.get_instance()
            assert second is not first
            assert Counter.initializations == 2

    def test_reset_without_instance_is_noop(self):
        Counter.reset_instance()
        with execution_context():
            Counter.reset_instance()

        assert Counter.cleanups == 0
