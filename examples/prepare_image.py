"""
Converting absent values into errors while preparing an image for upload.

The watermark/encrypt steps are stubs that return None, so the pipeline
fails at the first step.

Run: python examples/prepare_image.py
"""
from typing import Optional

from optionkit import from_nullable, ConsoleLogger


class PreparationFailed(Exception):
    pass


class Image:
    def __init__(self, name: str):
        self.name = name


def watermark(image: Image) -> Optional[Image]:
    print("watermark", image.name)
    return None


def encrypt(image: Image) -> Optional[Image]:
    print("encrypt", image.name)
    return None


def prepare_image_for_upload(image: Image) -> Image:
    watermarked = from_nullable(watermark(image)).or_else_throw(PreparationFailed)
    return from_nullable(encrypt(watermarked)).or_else_throw(PreparationFailed)


def main():
    logger = ConsoleLogger(name="upload")
    try:
        prepare_image_for_upload(Image("cat.png"))
    except PreparationFailed:
        logger.error("preparation failed", image="cat.png")


if __name__ == "__main__":
    main()
