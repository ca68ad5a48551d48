from __future__ import annotations

from pydantic import BaseModel, Field

class DiscordEmbedField(BaseModel):
    name: str
    value: str
    inline: bool = True

class DiscordEmbedFooter(BaseModel):
    text: str
    icon_url: str | None = None

class DiscordEmbed(BaseModel):
    title: str
    description: str
    color: int = Field(..., ge=0, le=0xFFFFFF, description="Cor RGB em inteiro")
    fields: list[DiscordEmbedField] = Field(default_factory=list)
    timestamp: str
    footer: DiscordEmbedFooter

class DiscordMessage(BaseModel):
    """Documento enviado ao webhook do Discord."""
    username: str
    avatar_url: str | None = None
    embeds: list[DiscordEmbed] = Field(default_factory=list)

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
