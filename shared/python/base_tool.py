"""
TM35FIN Converter — Shared Base Tool
=====================================
Base class for tools that read one coordinate file and write another.
``run()`` validates, processes, then logs the elapsed time; subclasses
supply ``validate_inputs`` and ``process``.

Usage::

    from shared.python.base_tool import GeoTool

    class MyTool(GeoTool):
        def validate_inputs(self) -> None:
            ...
        def process(self) -> None:
            ...
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

# ---------------------------------------------------------------------------
# Package logger — modules get child loggers such as "tm35fin.records".
# ---------------------------------------------------------------------------
logger = logging.getLogger("tm35fin")


class GeoTool(ABC):
    """Abstract base class for the converter's file-to-file tools.

    Every concrete tool implements :meth:`validate_inputs` and
    :meth:`process`.  Calling :meth:`run` executes the full pipeline in the
    correct order.

    Attributes:
        input_path: Path to the input file.
        output_path: Path where output will be written.
        verbose: When ``True`` the tool logs DEBUG-level messages in
            addition to INFO/WARNING/ERROR.

    Example::

        tool = Tm35finConverter(
            input_path=Path("points.csv"),
            output_path=Path("points_wgs84.json"),
            config=ConverterConfig(input_type="csv", output_type="json"),
        )
        tool.run()
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        *,
        verbose: bool = False,
    ) -> None:
        """Initialise the base tool.

        Args:
            input_path: Path to the input file.
            output_path: Path where the tool will write its output.
            verbose: Set to ``True`` to enable debug-level console
                     logging during the run.  Defaults to ``False``.
        """
        self.input_path: Path = Path(input_path)
        self.output_path: Path = Path(output_path)
        self.verbose: bool = verbose

        self._configure_logging()

    # ------------------------------------------------------------------
    # Abstract interface
    # ------------------------------------------------------------------

    @abstractmethod
    def validate_inputs(self) -> None:
        """Validate all inputs before processing begins.

        Raises:
            InputValidationError: If a required file is missing or an
                option value is not accepted.
        """

    @abstractmethod
    def process(self) -> None:
        """Execute the tool's processing logic.

        Called by :meth:`run` after :meth:`validate_inputs` has succeeded.
        Any exception raised here propagates up through :meth:`run`.
        """

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Validate, process, and log the run time.

        Errors from ``validate_inputs`` or ``process`` propagate unchanged;
        nothing is logged as a success in that case.
        """
        logger.info("Starting %s", self.__class__.__name__)
        start = time.perf_counter()

        self.validate_inputs()
        self.process()

        elapsed = time.perf_counter() - start
        self._report_success(elapsed)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _report_success(self, elapsed: float) -> None:
        logger.info(
            "%s completed in %.2fs → %s",
            self.__class__.__name__,
            elapsed,
            self.output_path,
        )

    def _configure_logging(self) -> None:
        """Attach a console handler to the ``tm35fin`` logger if none is
        present, and set DEBUG or INFO level from ``self.verbose``.
        """
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                fmt="[%(asctime)s] %(levelname)-8s %(name)s — %(message)s",
                datefmt="%H:%M:%S",
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        logger.setLevel(logging.DEBUG if self.verbose else logging.INFO)
