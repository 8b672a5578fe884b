from aseres.frames import DerivedFrame
from aseres.sheet import RawFrameMetadata, RawTag, SheetContext


def make_raw_frame(x=0, y=0, width=1, height=1, trim_x=0, trim_y=0,
                   source_width=2, source_height=2, duration=100):
    return RawFrameMetadata(x, y, width, height, trim_x, trim_y,
                            source_width, source_height, duration)


def make_frame(duration):
    return DerivedFrame(width=1, height=1, x_offset=0, y_offset=0,
                        duration=duration, pixels=bytes(4))


def make_tag(start, end, direction="forward", name="Idle"):
    return RawTag(name, start, end, direction)


def solid_sheet(width, height, rgba=(255, 255, 255, 255)):
    return SheetContext(width, height, bytes(rgba) * (width * height))

