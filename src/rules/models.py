from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str


class LoggingRules(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class QueryRules(BaseModel):
    # Defaults used by the CLI when a command is given no explicit value
    salary_threshold: float = Field(default=100000.0, ge=0)
    top_earners_limit: int = Field(default=3, ge=0)


class Rules(BaseModel):
    schema_version: int
    project: ProjectRules
    logging: LoggingRules = Field(default_factory=LoggingRules)
    queries: QueryRules = Field(default_factory=QueryRules)
