"""Word pack registry for managing multiple word lists."""

import json
from pathlib import Path
from pydantic import BaseModel, Field

WORDS_FILE_NAME = "words.json"


class WordPackInfo(BaseModel):
    """Metadata about a registered word pack."""

    id: str = Field(description="Unique pack identifier (directory name)")
    name: str = Field(description="Display name")
    description: str = Field(description="Brief description")
    word_count: int = Field(default=0, description="Number of words in the pack")


class WordPackRegistry:
    """Registry for discovering and managing multiple word packs."""

    def __init__(self, packs_dir: str | Path = "word_packs"):
        self.packs_dir = Path(packs_dir)
        self._packs: dict[str, WordPackInfo] = {}
        self.load_errors: dict[str, str] = {}
        self._discover_packs()

    def _discover_packs(self) -> None:
        """Discover all available word packs."""
        if not self.packs_dir.exists():
            return

        for pack_path in sorted(self.packs_dir.iterdir()):
            if pack_path.is_dir():
                words_file = pack_path / WORDS_FILE_NAME
                if words_file.exists():
                    try:
                        with open(words_file, encoding="utf-8") as f:
                            data = json.load(f)
                    except (json.JSONDecodeError, UnicodeDecodeError) as e:
                        self.load_errors[pack_path.name] = str(e)
                        continue
                    if not isinstance(data, dict):
                        self.load_errors[pack_path.name] = f"{WORDS_FILE_NAME} must hold a JSON object"
                        continue
                    self._packs[pack_path.name] = WordPackInfo(
                        id=pack_path.name,
                        name=data.get("title", pack_path.name),
                        description=data.get("description", "No description"),
                        word_count=len(data.get("words", [])),
                    )

    def get_available_packs(self) -> list[WordPackInfo]:
        """Get list of all available word packs."""
        return list(self._packs.values())

    def get_pack(self, pack_id: str) -> WordPackInfo | None:
        """Get info for a specific word pack."""
        return self._packs.get(pack_id)

    def get_pack_config_dir(self, pack_id: str) -> Path | None:
        """Get the directory holding a word pack."""
        if pack_id not in self._packs:
            return None
        return self.packs_dir / pack_id

    def list_packs(self) -> str:
        """Get a formatted list of available word packs."""
        if not self._packs and not self.load_errors:
            return "No word packs found in the packs directory."

        lines = ["Available Word Packs:", ""]
        for i, (pack_id, info) in enumerate(self._packs.items(), 1):
            lines.append(f"  [{i}] {info.name} ({pack_id})")
            lines.append(f"      {info.description[:80]}")
            lines.append(f"      Words: {info.word_count}")
            lines.append("")

        for pack_id, error in self.load_errors.items():
            lines.append(f"  Skipped {pack_id}: {error}")

        return "\n".join(lines)
