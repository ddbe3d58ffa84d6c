import subprocess
import sys

__BASE_CMD = [
    sys.executable,
    "-m",
    "pytest",
]
__UNIT_TESTS = "./tests/unit/"


def __run_process(cmd: list[str]) -> None:
    """Run a process with additional arguments."""
    # Allow passing additional arguments to pytest
    # sys.argv[0] is the script name
    extra_args = sys.argv[1:]

    try:
        subprocess.check_call(cmd + extra_args)
    except subprocess.CalledProcessError as e:
        sys.exit(e.returncode)


def unit() -> None:
    """Run unit tests."""
    cmd = [
        *__BASE_CMD,
        __UNIT_TESTS,
    ]

    __run_process(cmd)


if __name__ == "__main__":
    unit()
