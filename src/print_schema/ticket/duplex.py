"""Duplex features at job and document scope."""

from print_schema.document.names import psk_name

from .feature_option_pack import FeatureOptionPack, PredefinedName


class PredefinedDuplexType(PredefinedName):
    """Duplex keywords.

    ``TwoSidedShortEdge`` flips the sheet parallel to its width,
    ``TwoSidedLongEdge`` parallel to its height.
    """

    OneSided = "OneSided"
    TwoSidedShortEdge = "TwoSidedShortEdge"
    TwoSidedLongEdge = "TwoSidedLongEdge"


class JobDuplex(FeatureOptionPack):
    """Option of the ``psk:JobDuplexAllDocumentsContiguously`` feature."""

    feature_name = psk_name("JobDuplexAllDocumentsContiguously")
    predefined_names = PredefinedDuplexType


class DocumentDuplex(FeatureOptionPack):
    """Option of the ``psk:DocumentDuplex`` feature."""

    feature_name = psk_name("DocumentDuplex")
    predefined_names = PredefinedDuplexType
