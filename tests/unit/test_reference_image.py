"""
Unit tests for ReferenceImageLoader.
"""
import pytest

from face_gate.application.use_cases.access.reference_image import ReferenceImageLoader
from face_gate.domain.exceptions import ComparisonError, ReferenceImageError


class TestReferenceImageLoader:

    @pytest.mark.asyncio
    async def test_reads_file_on_every_call(self, tmp_path):
        image_path = tmp_path / "target.jpg"
        image_path.write_bytes(b"first")
        loader = ReferenceImageLoader(image_path)

        assert await loader.load() == b"first"
        image_path.write_bytes(b"second")
        assert await loader.load() == b"second"

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path):
        loader = ReferenceImageLoader(tmp_path / "missing.jpg")

        with pytest.raises(ReferenceImageError) as exc_info:
            await loader.load()
        assert isinstance(exc_info.value, ComparisonError)
