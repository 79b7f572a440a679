from pydantic import StrictInt, StrictStr

from .base import FormModel


class GalleryItem(FormModel):
    id: StrictInt
    title: StrictStr
    src: StrictStr


class BlogImage(FormModel):
    id: StrictInt
    title: StrictStr
    src: StrictStr
