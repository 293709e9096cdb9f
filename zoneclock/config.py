"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List, Optional

import pendulum
import yaml
from pendulum.tz.exceptions import InvalidTimezone
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.models import Person, WorkingHours


class PersonConfig(BaseModel):
    """Team member configuration."""
    name: str
    timezone: str
    work_start_hour: int = 9
    work_end_hour: int = 17
    team: Optional[str] = None

    @field_validator("work_start_hour", "work_end_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Validate hour is between 0 and 23."""
        if not 0 <= v <= 23:
            raise ValueError(f"Hour must be between 0 and 23, got {v}")
        return v

    @field_validator("name", "timezone")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        """Reject empty names and timezone identifiers."""
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    def to_person(self) -> Person:
        """Convert to the domain model consumed by the core."""
        return Person(
            display_name=self.name,
            timezone=self.timezone,
            working_hours=WorkingHours(
                start_hour=self.work_start_hour,
                end_hour=self.work_end_hour
            ),
            team=self.team,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "UTC"
    refresh_seconds: int = 30
    teams: List[str] = Field(default_factory=list)
    people: List[PersonConfig] = Field(default_factory=list)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """The viewer timezone doubles as the fallback, so it must exist."""
        try:
            pendulum.timezone(value)
        except (InvalidTimezone, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("refresh_seconds")
    @classmethod
    def validate_refresh(cls, value: int) -> int:
        """Ensure the watch interval is positive."""
        if value <= 0:
            raise ValueError("refresh_seconds must be greater than zero")
        return value

    @field_validator("teams")
    @classmethod
    def validate_teams(cls, value: List[str]) -> List[str]:
        """Ensure team names are unique."""
        seen: set[str] = set()
        for team in value:
            key = team.lower()
            if key in seen:
                raise ValueError(f"Duplicate team name detected: {team}")
            seen.add(key)
        return value

    @field_validator("people")
    @classmethod
    def validate_people(cls, value: List[PersonConfig]) -> List[PersonConfig]:
        """Ensure person names are unique."""
        seen_names: set[str] = set()
        for person in value:
            name_key = person.name.lower()
            if name_key in seen_names:
                raise ValueError(f"Duplicate person name detected: {person.name}")
            seen_names.add(name_key)
        return value

    @model_validator(mode="after")
    def validate_team_references(self) -> "AppConfig":
        """Every team a person belongs to must be configured."""
        known = {team.lower() for team in self.teams}
        unknown = sorted({
            person.team for person in self.people
            if person.team is not None and person.team.lower() not in known
        })
        if unknown:
            raise ValueError(f"Unknown team(s) referenced by people: {', '.join(unknown)}")
        return self

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.
        
        Args:
            config_path: Path to the YAML config file
            
        Returns:
            AppConfig instance
            
        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )
        
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def find_person_by_name(self, name: str) -> PersonConfig | None:
        """Find a person by their name (case-insensitive)."""
        for person in self.people:
            if person.name.lower() == name.lower():
                return person
        return None

    def find_team(self, name: str) -> str | None:
        """Return the configured spelling of a team name."""
        for team in self.teams:
            if team.lower() == name.lower():
                return team
        return None

    def to_people(self) -> List[Person]:
        """All configured people as domain objects, in file order."""
        return [person.to_person() for person in self.people]


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"
    
    if not config_path.exists():
        # Try in the project root (parent of zoneclock/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"
    
    return config_path
