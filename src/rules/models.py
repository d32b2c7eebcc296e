from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class DataFileRules(BaseModel):
    glob: str = "**/trait.*.js"
    encoding: str = "utf-8"
    strict: bool = False

class RegistryRules(BaseModel):
    log_deliveries: bool = True

class LoggingRules(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

class Rules(BaseModel):
    project: ProjectRules
    datafiles: DataFileRules = Field(default_factory=DataFileRules)
    registry: RegistryRules = Field(default_factory=RegistryRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
