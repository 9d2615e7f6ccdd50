"""Value types shared by registry client implementations."""

from dataclasses import dataclass

from helm_oci.core.subprocess import CommandError


@dataclass(frozen=True)
class Credentials:
    """Username/password pair forwarded verbatim to the registry client."""

    username: str
    password: str

    @staticmethod
    def from_options(username: str | None, password: str | None) -> "Credentials | None":
        """Build credentials only when both halves are present.

        A lone username or a lone password is dropped without complaint, the
        same as supplying neither.

        Examples:
            >>> Credentials.from_options("bob", "hunter2")
            Credentials(username='bob', password='hunter2')
            >>> Credentials.from_options("bob", None) is None
            True
        """
        if not username or not password:
            return None
        return Credentials(username=username, password=password)

    def as_flags(self) -> list[str]:
        return ["--username", self.username, "--password", self.password]


class RegistryClientError(CommandError):
    """The registry client binary exited non-zero or could not be run."""

    @staticmethod
    def from_command_error(error: CommandError) -> "RegistryClientError":
        return RegistryClientError(
            str(error),
            command=error.command,
            returncode=error.returncode,
            stderr=error.stderr,
        )
