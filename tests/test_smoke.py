"""Tests for probspace package import and basic smoke tests."""

import importlib
import subprocess
import sys


class TestImport:
    """Test that probspace can be imported."""

    def test_import_probspace(self) -> None:
        """Test importing the probspace package."""
        import probspace

        assert hasattr(probspace, "__version__")
        assert isinstance(probspace.__version__, str)

    def test_reimport(self) -> None:
        """Test that probspace can be reimported."""
        import probspace

        importlib.reload(probspace)
        assert probspace.__version__

    def test_public_api(self) -> None:
        import probspace

        for name in probspace.__all__:
            assert hasattr(probspace, name), name


class TestDiceScenario:
    """End-to-end: a fair die, as a user of the package would drive it."""

    def test_dice_statistics(self) -> None:
        import probspace as ps

        d = ps.uniform_discrete(ps.HashSpace([1, 2, 3, 4, 5, 6]))
        assert ps.fully_supported(d)
        assert abs(ps.expectation(d, float) - 3.5) < 1e-9
        assert abs(ps.variance(d, float) - 2.9167) < 1e-4
        assert ps.simulate(d, rng=0) in d.domain

    def test_python_c_import(self) -> None:
        """Test importing probspace via python -c."""
        result = subprocess.run(
            [sys.executable, "-c", "import probspace; print(probspace.__version__)"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert result.stdout.strip()
