"""
DataFiles - Generated implementors data-file format.

The documentation generator writes one JavaScript file per trait, e.g.
``implementors/core/ops/trait.Mul.js``. The file builds an ``implementors``
object keyed by crate name, then hands it to ``register_implementors`` if
present or parks it in ``pending_implementors``.

Functional Core - pure parsing and emitting, no I/O.

Key behaviors:
- Trait path derives from the file location (``core/ops/trait.Mul.js``
  -> ``core::ops::Mul``)
- Crate entries are JSON string arrays, trailing comma allowed
- Descriptors pass through verbatim
- emit_datafile() output parses back to an equal DataFile
"""

from __future__ import annotations

import json
import re

from src.components.implementors import ImplementorMap

from .models import DataFile, DataFileValidationError

# --- Format Constants ---

PREAMBLE = "(function() {var implementors = {};"
REGISTRATION = (
    "\n"
    "            if (window.register_implementors) {\n"
    "                window.register_implementors(implementors);\n"
    "            } else {\n"
    "                window.pending_implementors = implementors;\n"
    "            }\n"
    "        \n"
    "})()\n"
)

_PREAMBLE_RE = re.compile(r"var\s+implementors\s*=\s*\{\s*\}\s*;")
_REGISTRATION_RE = re.compile(r"register_implementors\s*\(\s*implementors\s*\)")
_ENTRY_RE = re.compile(
    r'^implementors\["(?P<crate>(?:[^"\\]|\\.)*)"\]\s*=\s*\[(?P<body>.*)\];\s*$'
)
_FILENAME_RE = re.compile(r"^trait\.(?P<name>[A-Za-z_][A-Za-z0-9_]*)\.js$")
_SEGMENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


# --- Path Functions ---


def trait_path_from_relpath(
    relpath: str,
) -> tuple[str | None, list[DataFileValidationError]]:
    """
    Derive the trait path from a data file's path below the index root.

    Returns:
        Tuple of (trait_path, errors). trait_path is None if invalid.
    """
    parts = [part for part in relpath.replace("\\", "/").split("/") if part]
    if not parts:
        return None, [
            DataFileValidationError(
                code="invalid_filename",
                message="Data file path is empty",
                field="relpath",
            )
        ]

    match = _FILENAME_RE.match(parts[-1])
    if not match:
        return None, [
            DataFileValidationError(
                code="invalid_filename",
                message=f"Expected trait.<Name>.js, got '{parts[-1]}'",
                field="relpath",
            )
        ]

    modules = parts[:-1]
    bad = [segment for segment in modules if not _SEGMENT_RE.match(segment)]
    if bad:
        return None, [
            DataFileValidationError(
                code="invalid_module_path",
                message=f"Invalid module path segment '{bad[0]}'",
                field="relpath",
            )
        ]

    return "::".join([*modules, match.group("name")]), []


def relpath_for_trait(trait_path: str) -> str:
    """Inverse of trait_path_from_relpath."""
    *modules, name = trait_path.split("::")
    return "/".join([*modules, f"trait.{name}.js"])


# --- Parsing ---


def _parse_body(body: str) -> list[str] | None:
    text = body.strip()
    if text.endswith(","):
        text = text[:-1]
    try:
        values = json.loads(f"[{text}]")
    except json.JSONDecodeError:
        return None
    if not all(isinstance(value, str) for value in values):
        return None
    return values


def parse_datafile(
    text: str,
    trait_path: str,
) -> tuple[DataFile | None, list[DataFileValidationError]]:
    """
    Parse the text of a generated data file.

    Returns:
        Tuple of (datafile, errors). datafile is None if parsing fails.
    """
    errors: list[DataFileValidationError] = []

    if not _PREAMBLE_RE.search(text):
        errors.append(
            DataFileValidationError(
                code="missing_preamble",
                message="Data file does not declare the implementors object",
            )
        )
    if not _REGISTRATION_RE.search(text):
        errors.append(
            DataFileValidationError(
                code="missing_registration",
                message="Data file does not call register_implementors",
            )
        )
    if errors:
        return None, errors

    crates: dict[str, list[str]] = {}
    # Only \n separates entries; descriptors may hold U+2028, U+0085 and the like
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.startswith("implementors["):
            continue

        match = _ENTRY_RE.match(line)
        descriptors = _parse_body(match.group("body")) if match else None
        if match is None or descriptors is None:
            errors.append(
                DataFileValidationError(
                    code="invalid_entry",
                    message=f"Line {lineno} is not a list of implementor strings",
                    field=f"line:{lineno}",
                )
            )
            continue

        try:
            crate = json.loads(f'"{match.group("crate")}"')
        except json.JSONDecodeError:
            errors.append(
                DataFileValidationError(
                    code="invalid_entry",
                    message=f"Line {lineno} has an invalid crate name",
                    field=f"line:{lineno}",
                )
            )
            continue

        if crate in crates:
            errors.append(
                DataFileValidationError(
                    code="duplicate_crate",
                    message=f"Crate '{crate}' is assigned more than once",
                    field=f"line:{lineno}",
                )
            )
            continue

        crates[crate] = descriptors

    if errors:
        return None, errors

    return DataFile(trait_path=trait_path, crates=crates), []


# --- Emitting ---


def emit_datafile(datafile: DataFile) -> str:
    """Write a DataFile in the generated format."""
    lines = [PREAMBLE]
    for crate, descriptors in datafile.crates.items():
        items = "".join(
            json.dumps(descriptor, ensure_ascii=False) + "," for descriptor in descriptors
        )
        crate_key = json.dumps(crate, ensure_ascii=False)
        lines.append(f"implementors[{crate_key}] = [{items}];")
    return "\n".join(lines) + "\n" + REGISTRATION


# --- Conversion ---


def to_implementor_map(datafile: DataFile) -> ImplementorMap:
    """Flatten a data file into a single-trait implementor map."""
    descriptors = [
        descriptor
        for crate_descriptors in datafile.crates.values()
        for descriptor in crate_descriptors
    ]
    return {datafile.trait_path: descriptors}
