"""Domain errors for devos."""


class DevosError(RuntimeError):
    """Raised when a devos command cannot continue."""


class ConfigNotFound(DevosError):
    """The projects registry could not be read."""


class ConfigParseError(DevosError):
    """The projects registry is not a valid list of project records."""


class EditorLaunchFailure(DevosError):
    """No editor could be started for the projects registry."""


class ProjectNotFound(DevosError):
    """No registered project matches the requested name."""


class SpawnError(DevosError):
    """The project interpreter could not be started."""
