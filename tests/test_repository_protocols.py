"""
Tests for repository protocol definitions.

These tests verify that:
1. Protocol definitions are valid and importable
2. Protocols define the expected methods and parameters
3. Fakes and Supabase adapters expose the same methods
"""
import inspect

import pytest

# All tests in this module are pure logic tests - mark as unit
pytestmark = pytest.mark.unit


class TestProtocolImports:
    """Test that all protocols can be imported."""

    def test_sets_repository_import(self):
        from application.ports import SetsRepository
        assert SetsRepository is not None

    def test_exercises_repository_import(self):
        from application.ports import ExercisesRepository
        assert ExercisesRepository is not None


class TestSetsRepositoryProtocol:
    """Test SetsRepository protocol definition."""

    def test_list_for_user_signature(self):
        """list_for_user() takes keyword-only filters."""
        from application.ports import SetsRepository

        sig = inspect.signature(SetsRepository.list_for_user)
        params = sig.parameters

        assert list(params)[:2] == ["self", "user_id"]
        for name in ("exercise_id", "start", "end"):
            assert params[name].kind is inspect.Parameter.KEYWORD_ONLY
            assert params[name].default is None


class TestExercisesRepositoryProtocol:
    """Test ExercisesRepository protocol definition."""

    def test_has_required_methods(self):
        from application.ports import ExercisesRepository

        for method_name in ["list_for_user", "get_by_id"]:
            assert hasattr(ExercisesRepository, method_name), \
                f"ExercisesRepository should have method '{method_name}'"

    def test_include_deleted_defaults_to_false(self):
        from application.ports import ExercisesRepository

        sig = inspect.signature(ExercisesRepository.list_for_user)
        assert sig.parameters["include_deleted"].default is False


class TestImplementationsMatchProtocols:
    """Fakes and adapters share the protocol's parameters."""

    @pytest.mark.parametrize("impl_path", [
        "tests.fakes.FakeSetsRepository",
        "infrastructure.db.SupabaseSetsRepository",
    ])
    def test_sets_implementations(self, impl_path):
        from application.ports import SetsRepository

        impl = _load(impl_path)
        assert _params(impl.list_for_user) == _params(SetsRepository.list_for_user)

    @pytest.mark.parametrize("impl_path", [
        "tests.fakes.FakeExercisesRepository",
        "infrastructure.db.SupabaseExercisesRepository",
    ])
    def test_exercises_implementations(self, impl_path):
        from application.ports import ExercisesRepository

        impl = _load(impl_path)
        for method_name in ["list_for_user", "get_by_id"]:
            assert _params(getattr(impl, method_name)) == \
                _params(getattr(ExercisesRepository, method_name))


def _load(path):
    import importlib

    module_name, _, attr = path.rpartition(".")
    return getattr(importlib.import_module(module_name), attr)


def _params(func):
    return [
        (p.name, p.kind, p.default)
        for p in inspect.signature(func).parameters.values()
    ]
