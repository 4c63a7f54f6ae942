# ABOUTME: Launch-argument codec for stdio servers
# ABOUTME: Auth source and transport are stored as flags in the entry's args list
from dataclasses import dataclass

from mcpconf.models import Auth, Transport

# ABOUTME: Transport spellings used by clients and older entries
TRANSPORT_ALIASES: dict[str, Transport] = {
    "stdio": "stdio",
    "local": "stdio",
    "sse": "sse",
    "http": "http",
    "streamableHttp": "http",
    "streamable_http": "http",
    "streamable-http": "http",
    "remote": "http",
}

_VALUE_FLAGS = ("--transport", "--mcp", "--env", "--env-path")


@dataclass(frozen=True)
class DecodedArgs:
    """Result of scanning a stored argument list."""
    transport: Transport | None
    auth: Auth


def canonical_transport(tag: object) -> Transport | None:
    """Map a stored transport tag to stdio/sse/http, None if unrecognised."""
    if not isinstance(tag, str):
        return None
    return TRANSPORT_ALIASES.get(tag)


def looks_like_env_path(value: str) -> bool:
    """Classify the value of a legacy ``--env <value>`` flag.

    ABOUTME: Path separators, a leading '.' or '~', or a '.env' suffix mean a file path
    ABOUTME: Anything else is an env profile name
    """
    return (
        "/" in value
        or "\\" in value
        or value.startswith(".")
        or value.startswith("~")
        or value.endswith(".env")
    )


def encode_args(auth: Auth, transport: Transport = "stdio") -> list[str]:
    """Encode transport and auth source as launch arguments.

    ABOUTME: Produces [--transport=<t>, <auth-flag>]
    ABOUTME: Destination names are lowercased

    Args:
        auth: Auth source (mcp, env, env-path or session-env)
        transport: Transport the launched server should use

    Returns:
        Ordered argument list

    Raises:
        ValueError: If auth has no encodable form

    Examples:
        >>> encode_args(Auth.destination("TRIAL"))
        ['--transport=stdio', '--mcp=trial']
        >>> encode_args(Auth.session_env())
        ['--transport=stdio', '--session-env']
    """
    args = [f"--transport={transport}"]
    if auth.type == "mcp" and auth.value:
        args.append(f"--mcp={auth.value.lower()}")
    elif auth.type == "env" and auth.value:
        args.append(f"--env={auth.value}")
    elif auth.type == "env-path" and auth.value:
        args.append(f"--env-path={auth.value}")
    elif auth.type == "session-env":
        args.append("--session-env")
    else:
        raise ValueError(f"Cannot encode auth source '{auth.type}' without a value")
    return args


def decode_args(args: object) -> DecodedArgs:
    """Recover transport and auth source from a stored argument list.

    ABOUTME: Total - anything unparseable yields auth type 'unknown'
    ABOUTME: Accepts both --flag=value and --flag value forms
    ABOUTME: Bare --env (no value) is the legacy spelling of --session-env
    ABOUTME: When several auth flags are present the last one wins

    Args:
        args: Stored args value (normally a list of strings)

    Returns:
        DecodedArgs with transport (None if absent) and auth
    """
    if not isinstance(args, (list, tuple)):
        return DecodedArgs(transport=None, auth=Auth("unknown"))

    tokens = [token for token in args if isinstance(token, str)]
    transport: Transport | None = None
    auth = Auth("unknown")

    i = 0
    while i < len(tokens):
        token = tokens[i]
        flag, sep, value = token.partition("=")
        has_inline_value = bool(sep)

        if not has_inline_value and flag in _VALUE_FLAGS:
            following = tokens[i + 1] if i + 1 < len(tokens) else None
            if following is not None and not following.startswith("-"):
                value = following
                has_inline_value = True
                i += 1
            elif flag == "--env":
                # Bare --env: read credentials from the session environment
                auth = Auth.session_env()
                i += 1
                continue

        if flag == "--transport" and has_inline_value:
            transport = canonical_transport(value) or transport
        elif flag == "--mcp" and has_inline_value and value:
            auth = Auth.destination(value.lower())
        elif flag == "--env-path" and has_inline_value and value:
            auth = Auth.env_path(value)
        elif flag == "--env" and has_inline_value and value:
            if sep:
                auth = Auth.env_name(value)
            elif looks_like_env_path(value):
                auth = Auth.env_path(value)
            else:
                auth = Auth.env_name(value)
        elif flag == "--session-env" and not sep:
            auth = Auth.session_env()

        i += 1

    return DecodedArgs(transport=transport, auth=auth)
