"""Config validation errors, raised at process start and never on the publish path."""
from event_producer.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Broker settings could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable with no default is unset."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable {env_key} must be set", detail={"env": env_key})
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """A broker setting parsed fine but is out of range."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
