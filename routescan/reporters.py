"""
Report generators for route scan results
"""

import csv
import io
import json
from typing import Optional
from datetime import datetime
import sys

from .models import ScanResult


class BaseReporter:
    """Base class for reporters"""

    def report(self, result: ScanResult, output: Optional[str] = None) -> str:
        """Generate report and optionally write to file"""
        raise NotImplementedError

    def _write_output(self, content: str, output: Optional[str]) -> None:
        """Write content to file or stdout"""
        if output:
            with open(output, 'w', encoding='utf-8') as f:
                f.write(content)
        else:
            print(content)


class ConsoleReporter(BaseReporter):
    """Console/terminal route table with colors"""

    # ANSI color codes
    COLORS = {
        'GET': '\033[92m',       # Green
        'POST': '\033[93m',      # Yellow
        'PUT': '\033[94m',       # Blue
        'PATCH': '\033[96m',     # Cyan
        'DELETE': '\033[91m',    # Red
        'warning': '\033[93m',
        'error': '\033[91m',
        'dim': '\033[90m',
        'reset': '\033[0m',
        'bold': '\033[1m',
    }

    def __init__(self, use_colors: bool = True, verbose: bool = False):
        self.use_colors = use_colors and sys.stdout.isatty()
        self.verbose = verbose

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors enabled"""
        if not self.use_colors or color not in self.COLORS:
            return text
        return f"{self.COLORS[color]}{text}{self.COLORS['reset']}"

    def report(self, result: ScanResult, output: Optional[str] = None) -> str:
        """Generate console report"""
        lines = []

        lines.append("")
        lines.append(self._color("=" * 60, 'bold'))
        lines.append(self._color("  DISCOVERED ENDPOINTS", 'bold'))
        lines.append(self._color("=" * 60, 'bold'))
        lines.append("")

        lines.append(f"Target: {result.target_path}")
        lines.append(f"Files analyzed: {result.files_scanned}")
        lines.append(f"Scan duration: {result.scan_duration_seconds:.2f} seconds")
        lines.append("")

        lines.append(self._color("FILES BY FRAMEWORK:", 'bold'))
        for framework, count in result.summary.items():
            if count > 0:
                lines.append(f"  {framework}: {count}")
        lines.append("")

        endpoints_total = len(result.endpoints)
        if endpoints_total == 0:
            lines.append("No endpoints found.")
        else:
            lines.append(self._color(f"ENDPOINTS ({endpoints_total} total):", 'bold'))
            lines.append("-" * 60)

            for file_result in result.successful():
                outcome = file_result.outcome
                if not outcome.endpoints and not self.verbose:
                    continue

                lines.append("")
                lines.append(f"{self._color(file_result.file_path, 'bold')} [{outcome.framework.value}]")
                if not outcome.endpoints:
                    lines.append(self._color("  (no registrations)", 'dim'))

                for endpoint in outcome.endpoints:
                    method = self._color(f"{endpoint.method:<8}", endpoint.method)
                    row = f"  {method} {endpoint.pattern:<32} {endpoint.handler}"
                    if self.verbose:
                        row += self._color(f"  (line {endpoint.line})", 'dim')
                    lines.append(row)

        if result.errors:
            lines.append("")
            lines.append(self._color("SKIPPED FILES:", 'warning'))
            for error in result.errors:
                lines.append(f"  - {error}")

        lines.append("")
        lines.append(self._color("=" * 60, 'bold'))

        content = "\n".join(lines)
        self._write_output(content, output)
        return content


class CSVReporter(BaseReporter):
    """CSV format reporter, one row per endpoint"""

    COLUMNS = ['file_path', 'framework', 'method', 'pattern', 'handler', 'line']

    def report(self, result: ScanResult, output: Optional[str] = None) -> str:
        """Generate CSV report"""
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=self.COLUMNS)
        writer.writeheader()

        for file_result in result.successful():
            for endpoint in file_result.outcome.endpoints:
                writer.writerow({
                    'file_path': file_result.file_path,
                    'framework': file_result.outcome.framework.value,
                    'method': endpoint.method,
                    'pattern': endpoint.pattern,
                    'handler': endpoint.handler,
                    'line': endpoint.line,
                })

        content = buffer.getvalue()

        if output:
            with open(output, 'w', encoding='utf-8', newline='') as f:
                f.write(content)

        return content


class JSONReporter(BaseReporter):
    """JSON format reporter"""

    def report(self, result: ScanResult, output: Optional[str] = None) -> str:
        """Generate JSON report"""
        report_data = {
            'scan_info': {
                'target': result.target_path,
                'timestamp': datetime.now().isoformat(),
                'files_scanned': result.files_scanned,
                'duration_seconds': result.scan_duration_seconds,
            },
            'summary': result.summary,
            'total_endpoints': len(result.endpoints),
            'files': [f.to_dict() for f in result.successful()],
            'errors': result.errors,
        }

        content = json.dumps(report_data, indent=2)
        self._write_output(content, output)
        return content


def get_reporter(format: str, **kwargs) -> BaseReporter:
    """Factory function to get reporter by format"""
    reporters = {
        'console': ConsoleReporter,
        'csv': CSVReporter,
        'json': JSONReporter,
    }

    reporter_class = reporters.get(format.lower())
    if not reporter_class:
        raise ValueError(f"Unknown report format: {format}. Supported: {list(reporters.keys())}")

    return reporter_class(**kwargs)
