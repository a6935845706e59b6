# standard libraries
import logging

# third party libraries
# None

# local libraries
from nion.flex import CellSurface
from nion.flex import FlexCanvasItem
from nion.flex import FlexLayout
from nion.utils import Geometry

logging.basicConfig(level=logging.INFO)

# the program

height = 8

sidebar = FlexCanvasItem.BackgroundCellItem(fill_char=":", text="sidebar",
                                            visibility=FlexCanvasItem.minimum_size_visibility(width=12))
editor = FlexCanvasItem.BackgroundCellItem(fill_char=" ", text="editor")
editor.focused = True
status = FlexCanvasItem.BackgroundCellItem(fill_char="-", text="status")

body = FlexCanvasItem.FlexContainer(FlexLayout.FlexDirection.Row)
body.add_item(sidebar, proportion=1)
body.add_item(None, fixed_size=1)
body.add_item(editor, proportion=3, focus=True)
body.set_consumers(sidebar, [2])

root = FlexCanvasItem.FlexContainer(FlexLayout.FlexDirection.Column)
root.add_item(body, proportion=1)
root.add_item(status, fixed_size=1)

for width in (60, 40):
    surface = CellSurface.CellSurface(Geometry.IntSize(width=width, height=height), fill_char=".")
    root.update_layout(Geometry.IntRect(origin=Geometry.IntPoint(x=0, y=0), size=Geometry.IntSize(width=width, height=height)))
    root.draw(surface)
    print(surface.to_text())
    print()
