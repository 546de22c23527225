"""Credential providers for git network operations."""

from reading_sync.core import CredentialProvider


class TokenRewriteCredentials(CredentialProvider):
    """Authenticate HTTPS GitHub remotes with an access token.

    The token is injected through ``GIT_CONFIG_*`` environment variables as a
    ``url.<base>.insteadOf`` rule, so it only applies to the git process it
    is passed to and never lands in the repository config.
    """

    def __init__(self, token: str, prefix: str = "https://github.com/") -> None:
        self.token = token
        self.prefix = prefix

    @property
    def rewritten_prefix(self) -> str:
        scheme, _, host = self.prefix.partition("://")
        return f"{scheme}://x-access-token:{self.token}@{host}"

    def environment(self) -> dict[str, str]:
        return {
            "GIT_CONFIG_COUNT": "1",
            "GIT_CONFIG_KEY_0": f"url.{self.rewritten_prefix}.insteadOf",
            "GIT_CONFIG_VALUE_0": self.prefix,
            "GIT_TERMINAL_PROMPT": "0",
        }
