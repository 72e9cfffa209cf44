"""Athena table definitions for result objects."""

from __future__ import annotations

from jinja2 import BaseLoader, Environment, StrictUndefined

from tweet_insights.model.results import BaseResult, ResultKind

ENV = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)

SQL_CREATE_TABLE = """
CREATE EXTERNAL TABLE IF NOT EXISTS `{{ database }}`.`{{ table_name }}` (
{% for col, dtype in columns %}
    `{{ col }}` {{ dtype }}{{ "," if not loop.last else "" }}
{% endfor %}
)
ROW FORMAT SERDE 'org.openx.data.jsonserde.JsonSerDe'
LOCATION '{{ location }}'
{% if table_properties %}
TBLPROPERTIES (
{% for key, value in table_properties %}
    '{{ key }}' = '{{ value }}'{{ "," if not loop.last else "" }}
{% endfor %}
)
{% endif %}
""".strip()

_PY2ATHENA = {
    str: "string",
    float: "double",
    int: "bigint",
    bool: "boolean",
}


def get_columns(model: type[BaseResult]) -> list[tuple[str, str]]:
    """Map result fields to Athena column types."""
    return [
        (name, _PY2ATHENA.get(field.annotation, "string"))
        for name, field in model.model_fields.items()
    ]


def get_table_query(
    kind: ResultKind,
    database: str,
    bucket: str,
    prefix: str = "",
    properties: dict[str, str] | None = None,
) -> str:
    """Generate the CREATE TABLE query for one result kind."""
    template = ENV.from_string(SQL_CREATE_TABLE)
    return template.render(
        database=database,
        table_name=kind.folder,
        columns=get_columns(kind.result_model),
        location=f"s3://{bucket}/{prefix}{kind.folder}/",
        table_properties=list((properties or {}).items()),
    ).strip()
