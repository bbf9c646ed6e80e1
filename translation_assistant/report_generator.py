"""HTML report on suggestion groups and their templates."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from jinja2 import Template
from loguru import logger

from .assistant import TranslationAssistant
from .config import ReportConfig
from .models import GroupStatus


class ReportGenerator:
    """Generates HTML reports for the groups of a translation assistant."""

    TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <style>
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .header {
            background-color: #2c3e50;
            color: white;
            padding: 30px;
            border-radius: 8px;
            margin-bottom: 30px;
        }
        .section {
            background: white;
            padding: 20px;
            margin-bottom: 20px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        .stats {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
            gap: 15px;
        }
        .stat-item {
            background: #ecf0f1;
            padding: 15px;
            border-radius: 5px;
        }
        .stat-label {
            font-size: 0.9em;
            color: #7f8c8d;
        }
        .stat-value {
            font-size: 1.5em;
            font-weight: bold;
        }
        .group {
            padding: 10px 15px;
            margin-bottom: 10px;
            border-radius: 5px;
            border-left: 4px solid #bdc3c7;
            background: #ecf0f1;
        }
        .group-templated { border-left-color: #27ae60; }
        .group-failed { border-left-color: #e74c3c; background: #fee; }
        .key {
            font-family: monospace;
            font-size: 0.9em;
            white-space: pre-wrap;
        }
        .failure {
            color: #c0392b;
            margin-top: 5px;
        }
    </style>
</head>
<body>
    <div class="header">
        <h1>{{ title }}</h1>
        <p><strong>Language:</strong> {{ lang }}</p>
        <p><strong>Generated:</strong> {{ timestamp }}</p>
    </div>

    <div class="section">
        <h2>Statistics</h2>
        <div class="stats">
            {% for label, value in stats %}
            <div class="stat-item">
                <div class="stat-label">{{ label }}</div>
                <div class="stat-value">{{ value }}</div>
            </div>
            {% endfor %}
        </div>
    </div>

    <div class="section">
        <h2>Groups</h2>
        {% for group in groups %}
        <div class="group group-{{ group.status }}">
            <div class="key">{{ group.key }}</div>
            <div>{{ group.status }}, {{ group.item_count }} item(s)</div>
            {% if group.failure %}
            <div class="failure">{{ group.failure }}</div>
            {% endif %}
            {% if group.samples %}
            <ul>
                {% for sample in group.samples %}
                <li class="key">{{ sample }}</li>
                {% endfor %}
            </ul>
            {% endif %}
        </div>
        {% endfor %}
    </div>
</body>
</html>
"""

    def __init__(self, config: Optional[ReportConfig] = None):
        """Initialize generator.

        Args:
            config: Report settings (defaults if None)
        """
        self.config = config or ReportConfig()

    def generate_report(
        self,
        assistant: TranslationAssistant,
        output_path: Optional[str] = None,
    ) -> str:
        """Generate HTML report.

        Args:
            assistant: Assistant whose groups are reported
            output_path: Path to save report (falls back to the configured path,
                nothing is written if neither is set)

        Returns:
            Rendered HTML
        """
        stats = assistant.statistics()
        max_items = self.config.max_items_per_group

        groups = []
        for group in assistant.groups:
            groups.append({
                "key": group.key.serialize(),
                "status": group.status.value,
                "item_count": len(group.items),
                "failure": (
                    f"{group.template.kind.value}: {group.template.message}"
                    if group.status == GroupStatus.FAILED else None
                ),
                "samples": [
                    assistant.get_english_str(item) for item in group.items[:max_items]
                ],
            })

        template = Template(self.TEMPLATE, autoescape=True)
        html = template.render(
            title=self.config.title,
            lang=assistant.lang,
            timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            stats=[
                ("Items", stats["items"]),
                ("Groups", stats["groups"]),
                ("Templated Groups", stats[GroupStatus.TEMPLATED.value]),
                ("Failed Groups", stats[GroupStatus.FAILED.value]),
                ("Untranslated Groups", stats[GroupStatus.UNTRANSLATED.value]),
            ],
            groups=groups,
        )

        output_path = output_path or self.config.output_path
        if output_path:
            report_path = Path(output_path)
            report_path.parent.mkdir(parents=True, exist_ok=True)

            with open(report_path, 'w', encoding='utf-8') as f:
                f.write(html)

            logger.info("Report written to {}", report_path)

        return html
