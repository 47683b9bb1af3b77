"""Package metadata schema.

Holds the values extracted from a PISI/SOL ``metadata.xml`` document.

Document structure:
    <PISI>                      # or <SOL>
    ├── <Source>...</Source>
    ├── <Package>
    │   ├── <Name>...</Name>    # package_name
    │   └── <PartOf>...</PartOf>  # component
    └── <History>...</History>
"""

from pydantic import BaseModel


class PackageMetadata(BaseModel):
    """Values extracted from a metadata.xml document.

    Attributes:
        package_name: Text of <Name> directly inside <Package>
        component: Text of <PartOf> anywhere under the root
    """

    package_name: str | None = None
    component: str | None = None
