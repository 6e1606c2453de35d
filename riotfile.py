# type: ignore
from typing import List  # noqa
from typing import Tuple  # noqa

from riot import Venv


latest = ""


SUPPORTED_PYTHON_VERSIONS: List[Tuple[int, int]] = [
    (3, 8),
    (3, 9),
    (3, 10),
    (3, 11),
    (3, 12),
    (3, 13),
]


def version_to_str(version: Tuple[int, int]) -> str:
    """Convert a Python version tuple to a string

    >>> version_to_str((3, 8))
    '3.8'
    >>> version_to_str((3, 13))
    '3.13'
    """
    return ".".join(str(p) for p in version)


def select_pys(min_version: str = "3.8", max_version: str = "3.13") -> List[str]:
    """Helper to select python versions from the list of versions we support

    >>> select_pys(min_version="3.12")
    ['3.12', '3.13']
    """
    min_version = tuple(int(p) for p in min_version.split("."))
    max_version = tuple(int(p) for p in max_version.split("."))
    return [version_to_str(version) for version in SUPPORTED_PYTHON_VERSIONS if min_version <= version <= max_version]


venv = Venv(
    pkgs={
        "mock": latest,
        "pytest": latest,
        "pytest-cov": latest,
        "hypothesis": latest,
    },
    env={
        "MATOMO_TRACKER_LOGGING_RATE": "60",
    },
    venvs=[
        Venv(
            name="tests",
            pys=select_pys(),
            command="pytest {cmdargs} tests/",
        ),
        Venv(
            name="riot-helpers",
            pys=["3"],
            command="python -m doctest {cmdargs} riotfile.py",
        ),
    ],
)
