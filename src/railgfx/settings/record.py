"""Graphics settings record using Pydantic.

The record mirrors the JSON object the game itself keeps in the store.
Field aliases are the external names and must match exactly; the game
reads the same value.
"""

import json
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field

# The game reads every integer field as a signed 64-bit value.
Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]

# External name -> default value, in serialization order.
DEFAULTS: Dict[str, Any] = {
    "FPS": 60,
    "EnableVSync": True,
    "RenderScale": 1.0,
    "ResolutionQuality": 3,
    "ShadowQuality": 3,
    "LightQuality": 3,
    "CharacterQuality": 3,
    "EnvDetailQuality": 3,
    "ReflectionQuality": 3,
    "SFXQuality": 3,
    "BloomQuality": 3,
    "AAMode": 1,
    "EnableMetalFXSU": False,
    "EnableHalfResTransparent": False,
    "EnableSelfShadow": 1,
    "DLSSQuality": 0,
    "ParticleTrailSmoothness": 3,
}


class GraphicsSettings(BaseModel):
    """Full set of graphics settings.

    Every field is required when decoding; a stored object missing any of
    them is treated as malformed rather than merged with defaults.
    """

    model_config = ConfigDict(
        extra="ignore",  # The game may add keys of its own
        strict=True,
        allow_inf_nan=False,
        validate_assignment=True,
    )

    fps: Int64 = Field(alias="FPS")
    enable_vsync: bool = Field(alias="EnableVSync")
    render_scale: float = Field(alias="RenderScale")
    resolution_quality: Int64 = Field(alias="ResolutionQuality")
    shadow_quality: Int64 = Field(alias="ShadowQuality")
    light_quality: Int64 = Field(alias="LightQuality")
    character_quality: Int64 = Field(alias="CharacterQuality")
    env_detail_quality: Int64 = Field(alias="EnvDetailQuality")
    reflection_quality: Int64 = Field(alias="ReflectionQuality")
    sfx_quality: Int64 = Field(alias="SFXQuality")
    bloom_quality: Int64 = Field(alias="BloomQuality")
    aa_mode: Int64 = Field(alias="AAMode")
    enable_metal_fxsu: bool = Field(alias="EnableMetalFXSU")
    enable_half_res_transparent: bool = Field(alias="EnableHalfResTransparent")
    enable_self_shadow: Int64 = Field(alias="EnableSelfShadow")
    dlss_quality: Int64 = Field(alias="DLSSQuality")
    particle_trail_smoothness: Int64 = Field(alias="ParticleTrailSmoothness")

    @classmethod
    def defaults(cls) -> "GraphicsSettings":
        """Create a record holding the documented default values."""
        return cls.model_validate(DEFAULTS)

    @classmethod
    def from_json(cls, text: str) -> "GraphicsSettings":
        """Decode a record from its JSON text.

        Raises:
            pydantic.ValidationError: If the text is not valid JSON, a field
                is missing, a value has the wrong type, a number is not
                finite, or an integer does not fit in 64 bits.
        """
        return cls.model_validate_json(text)

    def to_json(self) -> str:
        """Encode the record as compact JSON using the external names."""
        return self.model_dump_json(by_alias=True)

    def to_external(self) -> Dict[str, Any]:
        """Return the record as a dict keyed by external names."""
        return self.model_dump(by_alias=True)

    def pretty(self) -> str:
        """Render the record as indented JSON for display."""
        return json.dumps(self.to_external(), indent=2, ensure_ascii=False)
