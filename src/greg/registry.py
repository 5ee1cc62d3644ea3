"""OpenGL registry loading and declaration text scraping."""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from .errors import RegistryError


def load_registry(xml_path: Union[str, Path]) -> ET.Element:
    """Load and parse the OpenGL registry XML.

    A missing or unreadable file raises OSError. A document that is not
    well-formed, or whose root is not <registry>, raises RegistryError.
    """
    try:
        tree = ET.parse(xml_path)
    except ET.ParseError as e:
        raise RegistryError(f"Failed to parse {xml_path}: {e}") from e

    root = tree.getroot()
    if root.tag != "registry":
        raise RegistryError(f"{xml_path} is not an API registry")
    return root


def api_name(elem: ET.Element) -> str:
    """Return the API name of a <type> element, "gl" when it has none."""
    return elem.get("api", "gl")


def type_name(elem: ET.Element) -> str:
    """Return the name of a <type> element.

    This is either a name attribute or the text of a <name> child.
    """
    name = elem.get("name")
    if name is not None:
        return name
    return elem.findtext("name", default="")


def command_name(elem: ET.Element) -> str:
    """Return the function name declared by a <command> element."""
    return elem.findtext("proto/name", default="")


def scrape_type_text(elem: ET.Element) -> str:
    """Return all text of a <type> element.

    Any <apientry/> element is replaced with the standard GLAPIENTRY.
    """
    if elem.tag == "apientry":
        return "GLAPIENTRY"

    result = elem.text or ""
    for child in elem:
        result += scrape_type_text(child)
        result += child.tail or ""
    return result


def scrape_proto_text(elem: ET.Element) -> str:
    """Return all text of a <proto> or <param> element, skipping <name>.

    This gives the C type text of a return value or parameter.
    """
    if elem.tag == "name":
        return ""

    result = elem.text or ""
    for child in elem:
        result += scrape_proto_text(child)
        result += child.tail or ""
    return result


def command_params(command_elem: ET.Element) -> str:
    """Return the C parameter list of a <command> element.

    Commands without parameters get "void".
    """
    params = [scrape_proto_text(p) for p in command_elem.findall("param")]
    return ", ".join(params) or "void"
