"""Enumeration of rustdoc item kinds."""

from enum import Enum


class ItemKind(str, Enum):
    """The tag of a documented item."""

    MODULE = "module"
    STRUCT = "struct"
    ENUM = "enum"
    UNION = "union"
    TRAIT = "trait"
    TRAIT_ALIAS = "trait_alias"
    FUNCTION = "function"
    METHOD = "method"
    MACRO = "macro"
    DERIVE_MACRO = "derive_macro"
    ATTRIBUTE_MACRO = "attribute_macro"
    TYPE_ALIAS = "type_alias"
    CONSTANT = "constant"
    STATIC = "static"
    STRUCT_FIELD = "struct_field"
    VARIANT = "variant"
    ASSOC_CONST = "assoc_const"
    ASSOC_TYPE = "assoc_type"
    IMPL = "impl"
    RE_EXPORT = "re_export"
    PRIMITIVE = "primitive"
    EXTERN_CRATE = "extern_crate"
    UNKNOWN = "unknown"


# File name prefixes used by rustdoc for items that own a page.
PAGE_PREFIXES: dict[ItemKind, str] = {
    ItemKind.STRUCT: "struct",
    ItemKind.ENUM: "enum",
    ItemKind.UNION: "union",
    ItemKind.TRAIT: "trait",
    ItemKind.TRAIT_ALIAS: "traitalias",
    ItemKind.FUNCTION: "fn",
    ItemKind.MACRO: "macro",
    ItemKind.DERIVE_MACRO: "derive",
    ItemKind.ATTRIBUTE_MACRO: "attr",
    ItemKind.TYPE_ALIAS: "type",
    ItemKind.CONSTANT: "constant",
    ItemKind.STATIC: "static",
    ItemKind.PRIMITIVE: "primitive",
}
