"""Selection of the types, enums and commands a loader needs."""

import logging
import xml.etree.ElementTree as ET

from .errors import RegistryError
from .registry import api_name, command_name, type_name
from .types import FeatureRecord, Manifest, Profile, RemoveScope, Target, Version

logger = logging.getLogger(__name__)


def parse_feature_number(number: str) -> Version:
    """Parse a <feature> number attribute such as "4.6"."""
    major, _, minor = number.partition(".")
    try:
        return Version(int(major), int(minor or 0))
    except ValueError:
        raise RegistryError(f"Invalid feature number: {number}") from None


def support_token(target: Target) -> str:
    """Return the token matched against an extension's supported attribute."""
    if target.api == "gl" and target.profile is Profile.CORE:
        return "glcore"
    return target.api


def add_to_manifest(manifest: Manifest, require_elem: ET.Element) -> None:
    """Add the items of a <require> element to the manifest."""
    for child in require_elem.findall("type"):
        manifest.types.add(child.get("name", ""))
    for child in require_elem.findall("enum"):
        manifest.enums.add(child.get("name", ""))
    for child in require_elem.findall("command"):
        manifest.commands.add(child.get("name", ""))


def remove_from_manifest(manifest: Manifest, remove_elem: ET.Element) -> None:
    """Remove the items of a <remove> element from the manifest."""
    for child in remove_elem.findall("type"):
        manifest.types.discard(child.get("name", ""))
    for child in remove_elem.findall("enum"):
        manifest.enums.discard(child.get("name", ""))
    for child in remove_elem.findall("command"):
        manifest.commands.discard(child.get("name", ""))


def update_manifest(manifest: Manifest, target: Target, elem: ET.Element) -> None:
    """Apply a <feature> or <extension> element to the manifest.

    Every <require> block is applied. <remove> blocks only apply when a
    profile is selected and their scope matches it.
    """
    for require_elem in elem.findall("require"):
        add_to_manifest(manifest, require_elem)

    for remove_elem in elem.findall("remove"):
        scope = RemoveScope(remove_elem.get("profile"))
        if scope.applies_to(target.profile):
            remove_from_manifest(manifest, remove_elem)


def resolve(root: ET.Element, target: Target) -> Manifest:
    """Build the manifest of everything the target needs from the registry."""
    manifest = Manifest()

    for feature_elem in root.findall("feature"):
        if feature_elem.get("api") != target.api:
            continue

        version = parse_feature_number(feature_elem.get("number", "0"))
        if version > target.version:
            continue

        update_manifest(manifest, target, feature_elem)
        record = FeatureRecord(name=feature_elem.get("name", ""), version=version)
        manifest.versions.append(record)
        logger.info("Using %s", record.name)

    token = support_token(target)
    seen = set()
    for ext_elem in root.findall("extensions/extension"):
        name = ext_elem.get("name", "")
        if name not in target.extensions:
            continue
        seen.add(name)

        if token not in ext_elem.get("supported", "").split("|"):
            logger.warning("Excluding unsupported extension %s", name)
            continue

        update_manifest(manifest, target, ext_elem)
        if name not in manifest.extensions:
            manifest.extensions.append(name)
        logger.info("Using %s", name)

    for name in sorted(target.extensions - seen):
        logger.warning("Unknown extension %s", name)

    # Parameter types are not listed in <require> blocks
    for command_elem in root.findall("commands/command"):
        if command_name(command_elem) not in manifest.commands:
            continue
        for param_elem in command_elem.findall("param"):
            ptype = param_elem.find("ptype")
            if ptype is not None:
                manifest.types.add(ptype.text or "")

    for type_elem in root.findall("types/type[@requires]"):
        if type_name(type_elem) in manifest.types and api_name(type_elem) == target.api:
            manifest.types.add(type_elem.get("requires", ""))

    return manifest
