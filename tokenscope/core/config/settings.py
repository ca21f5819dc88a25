"""
Pipeline settings — the fixed constants both pipelines run with.

Nothing here is read from disk or the environment.  The values are the
contract between the generator and the reader:

    generator writes   <cwd>/data/generated_data_<stamp>.txt
    reader discovers   <cwd>/data/generated_data_*.txt
    reader writes      <app-base-dir>/output/analysis_<stamp>.txt

Input is anchored to the working directory, output to the application
base directory.  The two may differ.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# 10 MiB
TARGET_FILE_SIZE = 10 * 1024 * 1024

DATA_FOLDER = "data"
OUTPUT_FOLDER = "output"

DATA_FILE_PREFIX = "generated_data_"
DATA_FILE_SUFFIX = ".txt"
REPORT_FILE_PREFIX = "analysis_"

# Used in file names: yyyy-MM-dd_HH-mm-ss
FILE_STAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
# Used in the report header: yyyy-MM-dd HH:mm:ss
HEADER_STAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseModel):
    """Immutable bundle of the pipeline constants.

    The CLI always uses the defaults.  Tests build their own instance
    with a small ``target_size`` and temporary directories.
    """

    model_config = ConfigDict(frozen=True)

    target_size: int = Field(default=TARGET_FILE_SIZE, gt=0)
    separator: str = Field(default=",", min_length=1)
    data_folder: str = DATA_FOLDER
    output_folder: str = OUTPUT_FOLDER
    data_file_prefix: str = DATA_FILE_PREFIX
    data_file_suffix: str = DATA_FILE_SUFFIX
    report_file_prefix: str = REPORT_FILE_PREFIX
    read_chunk_size: int = Field(default=64 * 1024, gt=0)

    # Explicit anchors; None means "resolve at call time"
    working_dir: Path | None = None
    base_dir: Path | None = None

    @property
    def data_file_pattern(self) -> str:
        """Glob pattern matching every file the generator produces."""
        return f"{self.data_file_prefix}*{self.data_file_suffix}"

    def data_directory(self) -> Path:
        """Directory the generator writes to and the reader scans."""
        return data_directory(self.working_dir, self.data_folder)

    def output_directory(self) -> Path:
        """Directory the reader writes its reports to."""
        return output_directory(self.base_dir, self.output_folder)

    def data_file_name(self, now: datetime) -> str:
        return f"{self.data_file_prefix}{now.strftime(FILE_STAMP_FORMAT)}{self.data_file_suffix}"

    def report_file_name(self, now: datetime) -> str:
        return f"{self.report_file_prefix}{now.strftime(FILE_STAMP_FORMAT)}.txt"


def app_base_dir() -> Path:
    """Directory that contains the installed ``tokenscope`` package."""
    return Path(__file__).resolve().parents[3]


def data_directory(cwd: Path | None = None, folder: str = DATA_FOLDER) -> Path:
    """``<cwd>/data``; not created here."""
    return (cwd or Path.cwd()) / folder


def output_directory(base: Path | None = None, folder: str = OUTPUT_FOLDER) -> Path:
    """``<app-base-dir>/output``; not created here."""
    return (base or app_base_dir()) / folder
