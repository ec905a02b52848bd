"""
Route scanner - runs endpoint analysis over a directory of Go files
"""

import fnmatch
import os
import time
from pathlib import Path
from typing import List, Optional, Union
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from .analyzers.base import AnalyzerError
from .engine import EndpointAnalyzer
from .models import FileResult, ScanResult
from .signatures import SignatureRegistry, build_registry

logger = logging.getLogger(__name__)


class RouteScanner:
    """Analyzes every Go file under a target and collects the results"""

    EXTENSIONS = {'.go'}

    # Directories to skip
    SKIP_DIRS = {
        '.git', '.svn', '.hg', 'node_modules', '.idea', '.vscode',
        'testdata', '_output', 'dist', 'build', 'bin',
    }

    # Third-party code, skipped unless include_vendor is set
    VENDOR_DIRS = {'vendor', 'third_party'}

    TEST_FILE_SUFFIX = '_test.go'

    # Maximum file size to scan (10 MB)
    MAX_FILE_SIZE = 10 * 1024 * 1024

    def __init__(self, signatures: Optional[SignatureRegistry] = None, max_workers: int = 4,
                 skip_test_files: bool = False,
                 include_vendor: bool = False):
        self.max_workers = max_workers
        self.skip_test_files = skip_test_files
        self.include_vendor = include_vendor
        self.analyzer = EndpointAnalyzer(signatures=signatures)

    def scan(self, target_path: Union[str, Path],
             exclude_patterns: Optional[List[str]] = None) -> ScanResult:
        """Scan a directory or file for endpoint registrations"""
        start_time = time.time()
        target = Path(target_path).resolve()

        result = ScanResult(target_path=str(target))

        if not target.exists():
            result.errors.append(f"Target path does not exist: {target}")
            return result

        files_to_scan = self._collect_files(target, exclude_patterns)
        logger.info(f"Analyzing {len(files_to_scan)} Go files under {target}")

        if self.max_workers > 1 and len(files_to_scan) > 10:
            result.files = self._scan_parallel(files_to_scan)
        else:
            result.files = self._scan_sequential(files_to_scan)

        result.sort_files()
        result.errors = [f"{f.file_path}: {f.error}" for f in result.failed()]
        result.scan_duration_seconds = time.time() - start_time

        logger.info(
            f"Scan complete: {len(result.endpoints)} endpoints in "
            f"{len(result.successful())}/{result.files_scanned} files "
            f"in {result.scan_duration_seconds:.2f}s"
        )
        return result

    def scan_file(self, filepath: Path) -> FileResult:
        """Analyze one file; errors are captured, never raised"""
        try:
            outcome = self.analyzer.analyze_file(filepath)
        except AnalyzerError as e:
            logger.info(f"Skipping {filepath}: {e.message}")
            return FileResult(file_path=str(filepath), error=e.message)
        except OSError as e:
            logger.info(f"Cannot read {filepath}: {e}")
            return FileResult(file_path=str(filepath), error=str(e))

        return FileResult(file_path=str(filepath), outcome=outcome)

    def _collect_files(self, target: Path, exclude_patterns: Optional[List[str]] = None) -> List[Path]:
        """Collect all files to scan"""
        files = []
        exclude_patterns = exclude_patterns or []

        if target.is_file():
            if self._should_scan_file(target, exclude_patterns):
                files.append(target)
            return files

        skip_dirs = self.SKIP_DIRS if self.include_vendor else self.SKIP_DIRS | self.VENDOR_DIRS

        for root, dirs, filenames in os.walk(target):
            dirs[:] = sorted(d for d in dirs if d not in skip_dirs)

            root_path = Path(root)

            for filename in sorted(filenames):
                filepath = root_path / filename

                if self._should_scan_file(filepath, exclude_patterns):
                    files.append(filepath)

        return files

    def _should_scan_file(self, filepath: Path, exclude_patterns: List[str]) -> bool:
        """Determine if a file should be scanned"""
        if filepath.suffix.lower() not in self.EXTENSIONS:
            return False

        if self.skip_test_files and filepath.name.endswith(self.TEST_FILE_SUFFIX):
            return False

        # Skip large files
        try:
            if filepath.stat().st_size > self.MAX_FILE_SIZE:
                logger.debug(f"Skipping large file: {filepath}")
                return False
        except OSError:
            return False

        filepath_str = str(filepath)
        for pattern in exclude_patterns:
            if fnmatch.fnmatch(filepath_str, pattern) or fnmatch.fnmatch(filepath.name, pattern):
                return False

        return True

    def _scan_sequential(self, files: List[Path]) -> List[FileResult]:
        """Scan files sequentially"""
        return [self.scan_file(filepath) for filepath in files]

    def _scan_parallel(self, files: List[Path]) -> List[FileResult]:
        """Scan files in parallel"""
        results = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_file = {executor.submit(self.scan_file, f): f for f in files}

            for future in as_completed(future_to_file):
                results.append(future.result())

        return results


def create_scanner(signatures_file: Optional[str] = None,
                   max_workers: int = 4,
                   skip_test_files: bool = False,
                   include_vendor: bool = False) -> RouteScanner:
    """Factory function to create and configure a scanner

    Args:
        signatures_file: YAML file with extra framework signatures
        max_workers: Number of files analyzed concurrently
        skip_test_files: Skip *_test.go files
        include_vendor: Also scan vendor/ and third_party/ trees

    Returns:
        Configured RouteScanner instance

    Raises:
        ConfigurationError: If the signatures file cannot be loaded
    """
    return RouteScanner(
        signatures=build_registry(signatures_file),
        max_workers=max_workers,
        skip_test_files=skip_test_files,
        include_vendor=include_vendor,
    )
