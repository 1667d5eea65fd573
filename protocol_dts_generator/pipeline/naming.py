"""
Name derivation shared by every emission pass.

All declaration names are derived here so that the protocol module, the
mapping module and the API module can never disagree on how a command or
event payload is called.
"""

from __future__ import annotations

from pathlib import Path

DECLARATION_SUFFIX = ".d.ts"


def to_title_case(text: str) -> str:
    """Upper-case the first character and keep the rest unchanged.

    Examples:
        "getDocument" -> "GetDocument"
        "DOM" -> "DOM"
        "protocol" -> "Protocol"
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def request_name(command_name: str) -> str:
    return f"{to_title_case(command_name)}Request"


def response_name(command_name: str) -> str:
    return f"{to_title_case(command_name)}Response"


def event_payload_name(event_name: str) -> str:
    return f"{to_title_case(event_name)}Event"


def domain_api_name(domain_name: str) -> str:
    return f"{to_title_case(domain_name)}Api"


def qualified_member_name(domain_name: str, member_name: str) -> str:
    """Domain-prefixed name used outside the domain namespace, e.g. "Page.navigate"."""
    return f"{to_title_case(domain_name)}.{member_name}"


def qualified_declaration(module_prefix: str, domain_name: str, declaration: str) -> str:
    """Fully qualified reference to a declaration of the protocol module, e.g. "Protocol.Page.NavigateRequest"."""
    return f"{module_prefix}.{to_title_case(domain_name)}.{declaration}"


def quote_property_name(name: str) -> str:
    """Quote a property name if it has a . in it."""
    return f"'{name}'" if "." in name else name


def module_name_from_path(path: str | Path) -> str:
    """File stem of a declaration file, e.g. "types/protocol.d.ts" -> "protocol"."""
    name = Path(path).name
    if name.endswith(DECLARATION_SUFFIX):
        return name[: -len(DECLARATION_SUFFIX)]
    return Path(name).stem
