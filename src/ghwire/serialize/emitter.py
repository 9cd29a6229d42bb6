# serialize/emitter.py
from __future__ import annotations

import re
from typing import Any

import yaml
from yaml.nodes import ScalarNode

STR_TAG = "tag:yaml.org,2002:str"
BOOL_TAG = "tag:yaml.org,2002:bool"

# characters that force double quotes anywhere in a string;
# `@` only matters up front, so owner/repo@ref stays plain
_QUOTE_CHARS = set(":#&*!|>'\"%`")
# characters that may not start a plain scalar
_INDICATORS = set("-?[]{},&*!|>'\"%@`#:~")
_RESERVED = {"true", "false", "null", "yes", "no", "on", "off", "y", "n", "~"}
# text a literal block can carry verbatim
_BLOCK_SAFE = re.compile(r"[\t\n\x20-\x7e\xa0-\ud7ff\ue000-\ufefe\uff00-\ufffd\U00010000-\U0010ffff]*\Z")


class FlowList(list):
    """A list emitted inline: [a, b, c]."""


class PlainKey(str):
    """A string emitted without quotes even if it is a reserved word (the `on` key)."""


class GitHubDumper(yaml.SafeDumper):
    """
    SafeDumper tuned to the layout GitHub's own docs use:
      - block sequences indented under their key
      - booleans only for true/false (YAML 1.2), so `on` stays a string
    """

    def increase_indent(self, flow: bool = False, indentless: bool = False):
        return super().increase_indent(flow, False)

    def choose_scalar_style(self):
        # multi-line strings stay literal blocks even with tabs or trailing spaces
        if (
            self.event.style == "|"
            and not self.flow_level
            and not self.simple_key_context
            and _BLOCK_SAFE.match(self.event.value)
        ):
            return "|"
        return super().choose_scalar_style()


# Drop YAML 1.1 booleans (yes/no/on/off) from implicit resolution.
GitHubDumper.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeDumper.yaml_implicit_resolvers.items()
}
GitHubDumper.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def needs_quotes(dumper: yaml.BaseDumper, value: str) -> bool:
    if value == "":
        return True
    if value != value.strip():
        return True
    if value.lower() in _RESERVED:
        return True
    if value[0].isdigit() or value[0] in _INDICATORS:
        return True
    if any(ch in _QUOTE_CHARS for ch in value):
        return True
    # anything else that would read back as a number, null, timestamp ...
    return dumper.resolve(ScalarNode, value, (True, False)) != STR_TAG


def represent_str(dumper: yaml.BaseDumper, value: str):
    if "\n" in value:
        return dumper.represent_scalar(STR_TAG, value, style="|")
    if needs_quotes(dumper, value):
        return dumper.represent_scalar(STR_TAG, value, style='"')
    return dumper.represent_scalar(STR_TAG, value)


def represent_plain_key(dumper: yaml.BaseDumper, value: PlainKey):
    return dumper.represent_scalar(STR_TAG, str(value))


def represent_flow_list(dumper: yaml.BaseDumper, value: FlowList):
    return dumper.represent_sequence("tag:yaml.org,2002:seq", value, flow_style=True)


GitHubDumper.add_representer(str, represent_str)
GitHubDumper.add_representer(PlainKey, represent_plain_key)
GitHubDumper.add_representer(FlowList, represent_flow_list)


def dump(data: Any) -> bytes:
    """Render normalized data (dicts, lists, scalars) to UTF-8 YAML bytes."""
    text = yaml.dump(
        data,
        Dumper=GitHubDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
        indent=2,
    )
    return text.encode("utf-8")
