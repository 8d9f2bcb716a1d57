"""Page orientation feature."""

from print_schema.document.names import psk_name

from .feature_option_pack import FeatureOptionPack, PredefinedName


class PredefinedPageOrientation(PredefinedName):
    Portrait = "Portrait"
    Landscape = "Landscape"
    ReversePortrait = "ReversePortrait"
    ReverseLandscape = "ReverseLandscape"


class PageOrientation(FeatureOptionPack):
    """Option of the ``psk:PageOrientation`` feature."""

    feature_name = psk_name("PageOrientation")
    predefined_names = PredefinedPageOrientation
