"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from assertkit work."""

    def test_assertions(self) -> None:
        from assertkit import assert_no_error, assert_none, assert_that

        assert callable(assert_that)
        assert callable(assert_none)
        assert callable(assert_no_error)

    def test_recovery(self) -> None:
        from assertkit import Capture, capture, captured, captured_async

        assert isinstance(capture(print), Capture)
        assert callable(captured)
        assert callable(captured_async)

    def test_errors(self) -> None:
        from assertkit import AssertionFailed, AssertionFailure, AssertionReason, UnknownCause

        assert issubclass(AssertionFailure, AssertionError)
        assert issubclass(UnknownCause, AssertionReason)
        assert AssertionFailed is not None

    def test_all_is_complete(self) -> None:
        import assertkit

        for name in assertkit.__all__:
            assert hasattr(assertkit, name), name


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_assertions(self) -> None:
        from assertkit.assertions import assert_that

        assert callable(assert_that)

    def test_decorators(self) -> None:
        from assertkit.decorators import captured

        assert callable(captured)

    def test_errors(self) -> None:
        from assertkit.errors import normalize_cause

        assert str(normalize_cause('x')) == 'x'

    def test_options(self) -> None:
        from assertkit.options import TextReason, merge_options

        assert str(merge_options([TextReason('y')]).reason.unwrap()) == 'y'
