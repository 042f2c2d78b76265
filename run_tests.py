#!/usr/bin/env python3
# ================================================================================
# Test Runner Script
# ================================================================================
#
# This is the main entry point for executing test suites.
# It provides a unified interface for running the page facade tests
# with various configurations.
#
# Features:
#   - Run unit tests (fake pages, no browser needed)
#   - Run UI tests (real browser, inline HTML fixtures)
#   - Generate Allure reports
#   - CI/CD pipeline support
#
# Usage:
#   python run_tests.py --suite unit
#   python run_tests.py --suite ui --browser firefox --no-headless
#   python run_tests.py --suite all --tags P0 smoke
#
# ================================================================================

import argparse
import os
import shutil
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import List

from loguru import logger


# Configure logging
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    level="INFO"
)

SUITE_PATHS = {
    "unit": "testsuites/unit",
    "ui": "testsuites/ui_testing/tests",
    "all": "testsuites/",
}


class TestRunner:
    """
    Main test runner class for orchestrating test execution.

    This class handles:
    - Test suite selection and execution
    - Browser configuration for UI tests (through config env overrides)
    - Report generation
    """

    __test__ = False

    def __init__(
        self,
        suite: str = "all",
        tags: List[str] = None,
        browser: str = "chromium",
        headless: bool = True,
        allure_report: bool = True,
        verbose: bool = False
    ):
        """
        Initialize test runner.

        Args:
            suite: Test suite to run - "unit", "ui", "all"
            tags: List of pytest markers to filter tests
            browser: Browser for UI tests - "chromium", "firefox", "webkit"
            headless: Run browser in headless mode
            allure_report: Generate Allure report
            verbose: Enable verbose output
        """
        self.suite = suite
        self.tags = tags or []
        self.browser = browser
        self.headless = headless
        self.allure_report = allure_report
        self.verbose = verbose

        # Paths
        self.root_dir = Path(__file__).parent
        self.reports_dir = self.root_dir / "reports"
        self.allure_results = self.reports_dir / "allure-results"
        self.allure_report_dir = self.reports_dir / "allure-report"

    def run(self) -> int:
        """
        Execute the test run.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        logger.info("=" * 60)
        logger.info("Starting Test Execution")
        logger.info("=" * 60)
        logger.info(f"Suite: {self.suite}")
        logger.info(f"Tags: {self.tags or 'All'}")
        if self.suite in ["ui", "all"]:
            logger.info(f"Browser: {self.browser}")
            logger.info(f"Headless: {self.headless}")
        logger.info("=" * 60)

        self._prepare_environment()

        cmd = self._build_pytest_command()
        logger.info(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, cwd=str(self.root_dir), env=self._build_env())
            exit_code = result.returncode
        except OSError as e:
            logger.error(f"Test execution failed: {e}")
            exit_code = 1

        if self.allure_report:
            self._generate_allure_report()

        self._print_summary(exit_code)

        return exit_code

    def _prepare_environment(self) -> None:
        """Prepare test environment."""
        self.reports_dir.mkdir(parents=True, exist_ok=True)
        self.allure_results.mkdir(parents=True, exist_ok=True)
        logger.debug("Environment prepared")

    def _build_env(self) -> dict:
        """Browser choice travels to the tests as config env overrides."""
        env = dict(os.environ)
        env["UI__BROWSER"] = self.browser
        env["UI__HEADLESS"] = "true" if self.headless else "false"
        return env

    def _build_pytest_command(self) -> List[str]:
        """Build the pytest command with all options."""
        cmd = [sys.executable, "-m", "pytest", SUITE_PATHS[self.suite]]

        if self.tags:
            cmd.extend(["-m", " or ".join(self.tags)])

        if self.allure_report:
            cmd.extend(["--alluredir", str(self.allure_results)])

        cmd.append("-v" if self.verbose else "-q")

        return cmd

    def _generate_allure_report(self) -> None:
        """Generate Allure HTML report."""
        logger.info("Generating Allure report...")

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        report_path = self.reports_dir / f"allure-report-{timestamp}"

        try:
            subprocess.run([
                "allure", "generate",
                str(self.allure_results),
                "-o", str(report_path),
                "--clean"
            ], check=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Please install Allure to generate reports.")
            return
        except subprocess.CalledProcessError as e:
            logger.error(f"Failed to generate Allure report: {e}")
            return

        # Create/update latest symlink
        latest_link = self.allure_report_dir
        if latest_link.is_symlink():
            latest_link.unlink()
        elif latest_link.exists():
            shutil.rmtree(latest_link)
        latest_link.symlink_to(report_path.name)

        logger.info(f"Report generated: {report_path}")
        logger.info(f"Latest report: {self.allure_report_dir}")

    def _print_summary(self, exit_code: int) -> None:
        """Print test execution summary."""
        logger.info("=" * 60)
        if exit_code == 0:
            logger.info("✅ TEST EXECUTION COMPLETED SUCCESSFULLY")
        else:
            logger.error(f"❌ TEST EXECUTION FAILED (exit code: {exit_code})")

        if self.allure_report:
            logger.info(f"📊 Report available at: {self.allure_report_dir}")

        logger.info("=" * 60)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="XPath Page Facade Test Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the browser-free unit tests
  python run_tests.py --suite unit

  # Run P0 smoke tests
  python run_tests.py --suite all --tags P0 smoke

  # Run UI tests with visible browser
  python run_tests.py --suite ui --no-headless --browser firefox
        """
    )

    parser.add_argument(
        "--suite",
        choices=sorted(SUITE_PATHS),
        default="all",
        help="Test suite to run (default: all)"
    )

    parser.add_argument(
        "--tags",
        nargs="+",
        default=[],
        help="Pytest markers to filter tests (e.g., P0 smoke alerts)"
    )

    parser.add_argument(
        "--browser",
        choices=["chromium", "firefox", "webkit"],
        default="chromium",
        help="Browser for UI tests (default: chromium)"
    )

    parser.add_argument(
        "--no-headless",
        action="store_true",
        help="Run browser in headed mode (visible)"
    )

    parser.add_argument(
        "--no-allure",
        action="store_true",
        help="Disable Allure report generation"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args()

    runner = TestRunner(
        suite=args.suite,
        tags=args.tags,
        browser=args.browser,
        headless=not args.no_headless,
        allure_report=not args.no_allure,
        verbose=args.verbose
    )

    sys.exit(runner.run())


if __name__ == "__main__":
    main()
