# Lazy imports so that `from umlloom.core.uml.parameters import TypeName`
# does not pull in the resolver and renderer, which depend on the type model.

__all__ = [
    # Data model
    "Notation",
    "Side",
    "Reference",
    "from_side",
    "to_side",
    # Signatures
    "TypeName",
    "TypeDisplay",
    "ParamNames",
    "Parameters",
    # Resolution and rendering
    "ReferenceResolver",
    "LegacyTag",
    "LegacyTagReferences",
    "DiagramContext",
    "ReferenceRenderer",
    "ClassDiagram",
    "IndentingWriter",
]

_IMPORT_MAP = {
    "Notation": ".reference",
    "Side": ".reference",
    "Reference": ".reference",
    "from_side": ".reference",
    "to_side": ".reference",
    "TypeName": ".parameters",
    "TypeDisplay": ".parameters",
    "ParamNames": ".parameters",
    "Parameters": ".parameters",
    "ReferenceResolver": ".resolver",
    "LegacyTag": ".legacy_tags",
    "LegacyTagReferences": ".legacy_tags",
    "DiagramContext": ".renderer",
    "ReferenceRenderer": ".renderer",
    "ClassDiagram": ".diagram",
    "IndentingWriter": ".indent",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'umlloom.core.uml' has no attribute {name}")
