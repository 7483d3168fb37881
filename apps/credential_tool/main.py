"""credential-tool entrypoint for seeding locally-managed credentials."""

from __future__ import annotations

import logging
from pathlib import Path

from credential_guard.application.services.credential_service import CredentialService
from credential_guard.config.settings import Settings, load_settings
from credential_guard.infrastructure.logging import configure_logging
from credential_guard.infrastructure.security.password_hasher import Sha256PasswordHasher
from credential_guard.infrastructure.security.random_source import SystemRandomSource

logger = logging.getLogger(__name__)


class CredentialToolConfigError(ValueError):
    """Raised when credential-tool environment configuration is invalid."""


def build_credential_service(*, settings: Settings) -> CredentialService:
    """Wire the credential service with production security adapters."""

    random_source = SystemRandomSource()
    return CredentialService(
        password_hasher=Sha256PasswordHasher(random_source=random_source),
        random_source=random_source,
        generated_password_length=settings.generated_password_length,
        require_strong_passwords=settings.require_strong_passwords,
    )


def read_password_file(password_file: str) -> str:
    """Read one plaintext password from file, dropping the trailing newline."""

    try:
        content = Path(password_file).read_text(encoding="utf-8")
    except OSError as exc:
        raise CredentialToolConfigError("failed to read CREDENTIAL_PASSWORD_FILE") from exc
    return content.rstrip("\r\n")


def run(*, settings: Settings) -> list[str]:
    """Produce output lines for one tool invocation."""

    service = build_credential_service(settings=settings)
    if settings.credential_password_file is not None:
        password = read_password_file(settings.credential_password_file)
        logger.info("credential_tool_hashing_password_file")
        return [service.hash_new_password(password=password)]

    issued = service.issue_temporary_password()
    return [f"password: {issued.password}", f"password_hash: {issued.password_hash}"]


def main() -> None:
    """Run credential-tool and print results to stdout."""

    settings = load_settings()
    configure_logging(level=settings.log_level)
    for line in run(settings=settings):
        print(line)


if __name__ == "__main__":
    main()
