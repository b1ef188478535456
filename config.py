from maplayout.project_types import LayoutConfig, MapExtent, Orientation

CONFIG: LayoutConfig = LayoutConfig(
    extent=MapExtent(
        bottom_left=(40.68, -74.03),  # (Latitude, Longitude)
        top_right=(40.88, -73.90),  # (Latitude, Longitude)
    ),
    scale=10,  # meters per canvas unit
    paper_format="Letter",
    orientation=Orientation.PORTRAIT,
    is_new_layout=True,
)
