"""Shared helper functions and constants."""

# Connection options shared by every module.
AUTH_OPTIONS = {
    "api_url": {
        "description": "Fully qualified URL of the Terrakube API, e.g. https://terrakube-api.example.com.",
        "required": True,
        "type": "str",
    },
    "access_token": {
        "description": "A Terrakube personal or team access token.",
        "required": True,
        "type": "str",
        "no_log": True,  # Sensitive information, do not log
    },
    "validate_certs": {
        "description": "Whether to verify the TLS certificate of the API.",
        "default": True,
        "type": "bool",
    },
}

AUTH_FIXTURE = {
    "access_token": "b83557fd8e2066e98f27dee8f3b3433cdc4183ce",
    "api_url": "https://terrakube-api.example.com",
}


def build_argument_spec(options: dict) -> dict:
    """
    Turns documented options into an Ansible argument spec by dropping the
    keys AnsibleModule does not understand.
    """
    spec = dict(AUTH_OPTIONS)
    spec.update(options)
    return {
        name: {key: value for key, value in option.items() if key != "description"}
        for name, option in spec.items()
    }


RSQL_RESERVED = set(" \t'\"(),;=!~<>")


def rsql_equals(field: str, value: str) -> str:
    """Builds the RSQL filter expression used by the Terrakube list endpoints."""
    if any(char in RSQL_RESERVED for char in value):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        value = f'"{escaped}"'
    return f"{field}=={value}"
