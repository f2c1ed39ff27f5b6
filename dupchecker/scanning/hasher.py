#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Decode + perceptual hash step for the image dupchecker.
"""

import warnings
from pathlib import Path
from typing import Union

import imagehash
from PIL import Image, UnidentifiedImageError

from ..config import DEFAULT_HASH_SIZE
from ..errors import DecodeError, DecodeErrorKind
from ..models.image_record import ImageRecord

# Suppress PIL warnings
warnings.filterwarnings("ignore", category=UserWarning,
                        message=".*Palette images with Transparency expressed in bytes.*")


def classify_decode_failure(exc: BaseException, opened: bool) -> DecodeErrorKind:
    """
    Map an exception raised while decoding to a DecodeErrorKind.

    `opened` tells whether the header was parsed before the failure.
    """
    if isinstance(exc, UnidentifiedImageError):
        return DecodeErrorKind.INVALID_SIGNATURE
    if isinstance(exc, OSError):
        if exc.errno is not None:
            return DecodeErrorKind.UNREADABLE
        if opened:
            # Pillow's decoders raise errno-less OSError on short or broken streams
            return DecodeErrorKind.TRUNCATED
    return DecodeErrorKind.OTHER


class ImageHasher:
    """Stateless average-hash fingerprinting; safe to share across threads."""

    def __init__(self, hash_size: int = DEFAULT_HASH_SIZE):
        self.hash_size = hash_size

    def process(self, path: Union[str, Path]) -> ImageRecord:
        """Decode one file and fingerprint it. Never raises for bad input."""
        path = str(path)
        opened = False
        try:
            with Image.open(path) as img:
                opened = True
                img.load()
                fingerprint = str(imagehash.average_hash(img, hash_size=self.hash_size))
        except Exception as e:
            kind = classify_decode_failure(e, opened)
            return ImageRecord.failed(DecodeError(path, kind, str(e) or type(e).__name__))
        return ImageRecord.hashed(path, fingerprint)
