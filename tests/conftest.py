"""Pytest configuration for the chronolex test suite.

Hypothesis profiles:
- dev: 500 examples, the default for local runs
- ci: 50 derandomized examples, chosen when CI=true
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE=<name> overrides the detection.

Tests marked ``fuzz`` (whole-range round trips, random format descriptions)
are skipped unless selected with ``pytest -m fuzz`` or by naming
test_roundtrip_fuzzing.py on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# Hypothesis profiles
# =============================================================================

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_PHASES, **_options)  # type: ignore[arg-type]


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


# =============================================================================
# Fuzz selection
# =============================================================================

_FUZZ_MODULE = "test_roundtrip_fuzzing"


def _fuzz_requested(config: pytest.Config) -> bool:
    if "fuzz" in str(config.getoption("-m", default="")):
        return True
    return any(_FUZZ_MODULE in str(arg) for arg in config.invocation_params.args)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless they were asked for."""
    if _fuzz_requested(config):
        return
    skip = pytest.mark.skip(reason="fuzz test, run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)
