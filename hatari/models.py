from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hatari.errors import ConfigurationError


class ClientIdentity(BaseModel):
    """
    Project and credential a client submits events with. Immutable.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    project_key: str = Field(min_length=1)
    api_key: str = Field(min_length=1, repr=False)

    @classmethod
    def create(cls, project_key: str, api_key: str) -> "ClientIdentity":
        """
        Build an identity, rejecting missing or empty keys.

        Raises:
            ConfigurationError: If either key is missing or empty.
        """
        try:
            return cls(project_key=project_key, api_key=api_key)
        except ValidationError as e:
            field = str(e.errors()[0]["loc"][0])
            if field == "project_key":
                raise ConfigurationError(setting="project key", value=project_key) from e
            raise ConfigurationError(
                message="Invalid API key specified.", setting="API key"
            ) from e
