"""Localized UI strings.

One frozen table per supported language. Row labels are keyed by
FieldId so the registry and the string tables stay independent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .settings.schema import FieldId


class Language(str, Enum):
    """Supported UI languages."""

    EN = "en"
    KO = "ko"
    JA = "ja"


@dataclass(frozen=True)
class Strings:
    """All user-facing text for one language."""

    title: str
    hint: str
    saved: str
    save_failed: str
    no_registry: str
    on: str
    off: str
    labels: Dict[FieldId, str]

    def label(self, field_id: FieldId) -> str:
        return self.labels.get(field_id, field_id.value)


# Language picker entries: (shortcut key, language, display name)
LANGUAGE_CHOICES = (
    ("1", Language.EN, "English"),
    ("2", Language.KO, "한국어 (Korean)"),
    ("3", Language.JA, "日本語 (Japanese)"),
)

PICKER_TITLE = "Select Language / 언어 선택 / 言語選択"
PICKER_HINT = "Enter to confirm"

_EN = Strings(
    title=" Star Rail Graphics Settings ",
    hint=" ↑↓ Navigate  ←→ Change  S Save  Q Quit ",
    saved="Settings saved.",
    save_failed="Save failed",
    no_registry="Registry key not found — using defaults. Save to create it.",
    on="On",
    off="Off",
    labels={
        FieldId.FPS: "FPS",
        FieldId.VSYNC: "VSync",
        FieldId.RENDER_SCALE: "Render Scale",
        FieldId.RESOLUTION_QUALITY: "Resolution Quality",
        FieldId.SHADOW_QUALITY: "Shadow Quality",
        FieldId.LIGHT_QUALITY: "Light Quality",
        FieldId.CHARACTER_QUALITY: "Character Quality",
        FieldId.ENV_DETAIL_QUALITY: "Environment Detail",
        FieldId.REFLECTION_QUALITY: "Reflection Quality",
        FieldId.SFX_QUALITY: "SFX Quality",
        FieldId.BLOOM_QUALITY: "Bloom Quality",
        FieldId.AA_MODE: "Anti-Aliasing",
        FieldId.SELF_SHADOW: "Self Shadow",
        FieldId.DLSS_QUALITY: "DLSS Quality",
        FieldId.PARTICLE_TRAIL: "Particle Trail",
    },
)

_KO = Strings(
    title=" 붕괴 : 스타레일 그래픽 설정 ",
    hint=" ↑↓ 이동  ←→ 변경  S 저장  Q 종료 ",
    saved="설정이 저장되었습니다.",
    save_failed="저장 실패",
    no_registry="레지스트리 키를 찾을 수 없습니다 — 기본값 사용 중. 저장하여 생성하세요.",
    on="켜기",
    off="끄기",
    labels={
        FieldId.FPS: "FPS",
        FieldId.VSYNC: "수직 동기화",
        FieldId.RENDER_SCALE: "렌더 스케일",
        FieldId.RESOLUTION_QUALITY: "해상도 품질",
        FieldId.SHADOW_QUALITY: "그림자 품질",
        FieldId.LIGHT_QUALITY: "조명 품질",
        FieldId.CHARACTER_QUALITY: "캐릭터 품질",
        FieldId.ENV_DETAIL_QUALITY: "환경 디테일",
        FieldId.REFLECTION_QUALITY: "반사 품질",
        FieldId.SFX_QUALITY: "효과 품질",
        FieldId.BLOOM_QUALITY: "블룸 품질",
        FieldId.AA_MODE: "안티앨리어싱",
        FieldId.SELF_SHADOW: "셀프 쉘도우",
        FieldId.DLSS_QUALITY: "DLSS 품질",
        FieldId.PARTICLE_TRAIL: "파티클 트레일",
    },
)

_JA = Strings(
    title=" 崩壊：スターレイル グラフィック設定 ",
    hint=" ↑↓ 移動  ←→ 変更  S 保存  Q 終了 ",
    saved="設定が保存されました。",
    save_failed="保存失敗",
    no_registry="レジストリキーが見つかりません — デフォルト値を使用中。保存して作成してください。",
    on="オン",
    off="オフ",
    labels={
        FieldId.FPS: "FPS",
        FieldId.VSYNC: "垂直同期",
        FieldId.RENDER_SCALE: "レンダースケール",
        FieldId.RESOLUTION_QUALITY: "解像度品質",
        FieldId.SHADOW_QUALITY: "影の品質",
        FieldId.LIGHT_QUALITY: "ライト品質",
        FieldId.CHARACTER_QUALITY: "キャラクター品質",
        FieldId.ENV_DETAIL_QUALITY: "環境ディテール",
        FieldId.REFLECTION_QUALITY: "反射品質",
        FieldId.SFX_QUALITY: "エフェクト品質",
        FieldId.BLOOM_QUALITY: "ブルーム品質",
        FieldId.AA_MODE: "アンチエイリアス",
        FieldId.SELF_SHADOW: "セルフシャドウ",
        FieldId.DLSS_QUALITY: "DLSS品質",
        FieldId.PARTICLE_TRAIL: "パーティクルトレイル",
    },
)

_TABLES: Dict[Language, Strings] = {
    Language.EN: _EN,
    Language.KO: _KO,
    Language.JA: _JA,
}


def strings_for(language: Language) -> Strings:
    """Get the string table for a language."""
    return _TABLES[Language(language)]
