"""Exception hierarchy for crate documentation generation."""


class CratesLlmsError(Exception):
    """Base class for every error raised by this package."""


class CoreError(CratesLlmsError):
    """Raised by the session derivation engine."""


class MalformedGraph(CoreError):
    """The supplied item graph violates a structural invariant."""


class AcquisitionError(CratesLlmsError):
    """Raised while obtaining an item graph from docs.rs or a local toolchain."""


class FetchError(AcquisitionError):
    """The documentation JSON could not be downloaded or decoded."""


class ToolchainError(AcquisitionError):
    """Running cargo/rustdoc failed or produced no JSON output."""


class GraphFormatError(AcquisitionError):
    """The JSON document is not shaped like rustdoc output."""
