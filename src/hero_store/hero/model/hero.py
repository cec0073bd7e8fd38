"""ヒーローのデータモデルを定義するモジュール."""

from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import Field, SQLModel


class HeroBase(SQLModel):
    """ヒーローの共通フィールド.

    Attributes
    ----------
        name: ヒーローの表示名(必須、空文字不可)
        description: ヒーローの説明(オプショナル)

    """

    name: str = Field(min_length=1)
    description: str | None = None


class Hero(HeroBase):
    """ストアが保持するヒーローを表すモデル.

    生成後は変更不可。更新時はフィールドをマージした新しいインスタンスで
    丸ごと置き換える。

    Attributes
    ----------
        id: ヒーローの一意識別子(ストアが採番、再利用されない)
        created_at: 登録日時

    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    created_at: datetime


class HeroCreate(HeroBase):
    """ヒーロー作成リクエスト.

    id と created_at はストア側で付与するため持たない。
    """


class HeroUpdate(SQLModel):
    """ヒーロー更新リクエスト(部分更新).

    明示的に指定されたフィールドのみ既存の値を上書きする。

    Attributes
    ----------
        name: 新しい表示名(指定時は空文字不可)
        description: 新しい説明

    """

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_none(cls, value: str | None) -> str:
        """name に None が明示的に渡された場合は拒否する."""
        if value is None:
            raise ValueError("name must not be None")
        return value
