"""
Export functionality for Addlee - write ranked matches as CSV, JSON or HTML.
"""

import csv
import html
import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console

from .config import check_value, get_config_manager
from .matching import MatchResult

console = Console()

CSV_FIELDS = [
    'rank', 'source_id', 'source_name', 'target_id', 'target_name',
    'score', 'text_similarity', 'tag_overlap', 'raw_score', 'tier', 'explanation'
]


class ExportManager:
    """Handles match result export in multiple formats."""

    def __init__(self, output_directory: str = ".", include_timestamps: bool = True):
        self.output_directory = Path(output_directory)
        self.include_timestamps = include_timestamps

    def export_match_results(self,
                             results: List[MatchResult],
                             format: str,
                             output_path: Optional[str] = None) -> str:
        """
        Export match results in specified format.

        Args:
            results: Ranked match results
            format: Export format ('csv', 'json', 'html')
            output_path: Custom output file path

        Returns:
            Path to generated file, or "" when there was nothing to export

        Raises:
            ConfigError: If the format is not csv, json or html
        """
        check_value('export', 'default_format', format)

        if not results:
            console.print("[yellow]No match results found to export[/yellow]")
            return ""

        output_file = Path(output_path) if output_path else self.output_directory / self._default_filename(format)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        rows = self._result_rows(results)
        if format == 'csv':
            self._export_matches_csv(rows, output_file)
        elif format == 'json':
            self._export_matches_json(rows, output_file)
        else:
            self._export_matches_html(rows, output_file)

        console.print(f"[green]Exported {len(rows)} match results to {output_file}[/green]")
        return str(output_file)

    def _default_filename(self, format: str) -> str:
        if self.include_timestamps:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return f"addlee_matches_{timestamp}.{format}"
        return f"addlee_matches.{format}"

    def _result_rows(self, results: List[MatchResult]) -> List[Dict]:
        rows = []
        for rank, result in enumerate(results, 1):
            row = {'rank': rank}
            row.update(result.to_dict())
            rows.append(row)
        return rows

    def _export_matches_csv(self, rows: List[Dict], output_file: Path) -> None:
        with open(output_file, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=CSV_FIELDS)
            writer.writeheader()
            for row in rows:
                writer.writerow(row)

    def _export_matches_json(self, rows: List[Dict], output_file: Path) -> None:
        export_data = {
            'generated_at': datetime.now().isoformat(),
            'total_matches': len(rows),
            'matches': rows
        }

        with open(output_file, 'w', encoding='utf-8') as jsonfile:
            json.dump(export_data, jsonfile, indent=2, ensure_ascii=False)

    def _export_matches_html(self, rows: List[Dict], output_file: Path) -> None:
        with open(output_file, 'w', encoding='utf-8') as htmlfile:
            htmlfile.write(self._generate_matches_html_content(rows))

    def _generate_matches_html_content(self, rows: List[Dict]) -> str:
        """Generate HTML content for match results."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        content = f"""<!DOCTYPE html>
<html>
<head>
    <title>Addlee Match Results</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 20px; }}
        .header {{ text-align: center; margin-bottom: 30px; }}
        .stats {{ background: #f5f5f5; padding: 15px; border-radius: 8px; margin-bottom: 20px; }}
        table {{ width: 100%; border-collapse: collapse; margin-top: 20px; }}
        th, td {{ padding: 12px; text-align: left; border-bottom: 1px solid #ddd; }}
        th {{ background-color: #E67A1E; color: white; }}
        tr:nth-child(even) {{ background-color: #f2f2f2; }}
        .score {{ font-weight: bold; }}
        .top {{ color: #2e7d32; }}
        .good {{ color: #f57c00; }}
        .other {{ color: #666; }}
    </style>
</head>
<body>
    <div class="header">
        <h1>Addlee Match Results</h1>
        <p>Generated on {timestamp}</p>
    </div>

    <div class="stats">
        <strong>Total Matches:</strong> {len(rows)}
    </div>

    <table>
        <thead>
            <tr>
                <th>Rank</th>
                <th>Score</th>
                <th>Creator</th>
                <th>Hotel</th>
                <th>Text</th>
                <th>Tags</th>
                <th>Why</th>
            </tr>
        </thead>
        <tbody>
"""

        for row in rows:
            content += f"""            <tr>
                <td>{row['rank']}</td>
                <td class="score {row['tier']}">{row['score']}%</td>
                <td>{html.escape(row['source_name'])}</td>
                <td>{html.escape(row['target_name'])}</td>
                <td>{row['text_similarity']}%</td>
                <td>{row['tag_overlap']}%</td>
                <td>{html.escape(row['explanation'])}</td>
            </tr>
"""

        content += """        </tbody>
    </table>
</body>
</html>
"""
        return content


def get_export_manager() -> ExportManager:
    """Get export manager configured from the export settings."""
    config = get_config_manager()
    return ExportManager(
        output_directory=config.get('export', 'output_directory'),
        include_timestamps=config.get('export', 'include_timestamps')
    )
