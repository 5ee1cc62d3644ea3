"""Generation of C source fragments from a manifest."""

import xml.etree.ElementTree as ET

from .registry import (
    api_name,
    command_name,
    command_params,
    scrape_proto_text,
    scrape_type_text,
    type_name,
)
from .types import Manifest, OutputBundle, Target

API_PREFIX = "GL_"
GREG_PREFIX = "GREG_"


def boolean_name(name: str) -> str:
    """Return the name of the flag variable for an extension or version."""
    if name.startswith(API_PREFIX):
        return GREG_PREFIX + name[len(API_PREFIX):]
    return name


def assemble(manifest: Manifest, target: Target, root: ET.Element) -> OutputBundle:
    """Generate the output fragments for a manifest."""
    output = OutputBundle()

    for extension in manifest.extensions:
        flag = boolean_name(extension)
        output.ext_macros.append(f"#define {extension} 1\n")
        output.ext_declarations.append(f"extern int {flag};\n")
        output.ext_definitions.append(f"GREGDEF int {flag} = 0;\n")
        output.ext_loaders.append(
            f'  {flag} = gregExtensionSupported("{extension}");\n'
        )

    for feature in manifest.versions:
        flag = boolean_name(feature.name)
        major, minor = feature.version
        output.ver_macros.append(f"#define {feature.name} 1\n")
        output.ver_declarations.append(f"extern int {flag};\n")
        output.ver_definitions.append(f"GREGDEF int {flag} = 0;\n")
        output.ver_loaders.append(
            f"  {flag} = gregVersionSupported({major}, {minor});\n"
        )

    for type_elem in root.findall("types/type"):
        if type_name(type_elem) not in manifest.types:
            continue
        if api_name(type_elem) != target.api:
            continue
        output.type_typedefs.append(scrape_type_text(type_elem) + "\n")

    for enum_elem in root.findall("enums/enum"):
        name = enum_elem.get("name", "")
        if name not in manifest.enums:
            continue
        output.enum_definitions.append(f"#define {name} {enum_elem.get('value', '')}\n")

    for command_elem in root.findall("commands/command"):
        function_name = command_name(command_elem)
        if function_name not in manifest.commands:
            continue

        typedef_name = f"PFN{function_name.upper()}PROC"
        pointer_name = f"greg_{function_name}"
        return_type = scrape_proto_text(command_elem.find("proto"))

        output.cmd_typedefs.append(
            f"typedef {return_type} (GLAPIENTRY *{typedef_name})"
            f"({command_params(command_elem)});\n"
        )
        output.cmd_declarations.append(f"extern {typedef_name} {pointer_name};\n")
        output.cmd_macros.append(f"#define {function_name} {pointer_name}\n")
        output.cmd_definitions.append(f"GREGDEF {typedef_name} {pointer_name} = NULL;\n")
        output.cmd_loaders.append(
            f'  {pointer_name} = ({typedef_name}) gregGetProcAddress("{function_name}");\n'
        )

    return output
