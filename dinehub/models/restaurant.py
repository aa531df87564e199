from typing import List, Optional
from sqlalchemy import String, Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from dinehub.core.database import Base

class Restaurant(Base):
    __tablename__ = "restaurants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    # Slugs are immutable once written; nothing updates this column
    slug: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    cuisine_type: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    cover_image: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    owner: Mapped["User"] = relationship("User", back_populates="restaurants")
    menus: Mapped[List["Menu"]] = relationship(
        "Menu", back_populates="restaurant", order_by="Menu.id"
    )
