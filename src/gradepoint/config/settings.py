from dataclasses import dataclass
import os
import sys
from dotenv import load_dotenv


load_dotenv()

DEFAULT_PORT = 8550


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def default_runner_candidates(platform: str = sys.platform) -> tuple[str, ...]:
    if platform.startswith("win"):
        return ("pytest", "pytest.exe", "py -m pytest", "python -m pytest")
    return ("pytest", "py.test", "python3 -m pytest", "python -m pytest")


@dataclass(frozen=True)
class Settings:
    project_dir: str = os.getenv("GRADEPOINT_PROJECT_DIR", os.getcwd())
    test_runners: tuple[str, ...] = _split_csv(os.getenv("GRADEPOINT_TEST_RUNNERS", ",".join(default_runner_candidates())))
    coverage_dir: str = os.getenv("GRADEPOINT_COVERAGE_DIR", "htmlcov")
    artifacts_dir: str = os.getenv("GRADEPOINT_ARTIFACTS_DIR", os.path.join("build", "artifacts"))
    min_python: str = os.getenv("GRADEPOINT_MIN_PYTHON", "3.10")

    log_level: str = os.getenv("GRADEPOINT_LOG_LEVEL", "WARNING")
    web_mode: bool = os.getenv("GRADEPOINT_WEB", "0") == "1"
    port: int = _int_env("PORT", DEFAULT_PORT)


settings = Settings()
