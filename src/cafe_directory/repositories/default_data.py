"""Directory contents used when no data file is configured."""

from cafe_directory.entities import CafeEntity

DEFAULT_CAFES: dict[str, tuple[CafeEntity, ...]] = {
    "moscow": (
        CafeEntity("Мир кофе", "ул. Тверская, 12", 2),
        CafeEntity("Сладкоежка", "ул. Арбат, 25", 1),
        CafeEntity("Кофе и завтраки", "ул. Покровка, 8", 2),
        CafeEntity("Сытый студент", "ул. Моховая, 11", 1),
        CafeEntity("Ложка и вилка", "ул. Мясницкая, 17", 2),
        CafeEntity("Серебряная ложка", "ул. Пятницкая, 3", 3),
    ),
    "tula": (
        CafeEntity("Тульский пряник", "пр. Ленина, 30", 1),
        CafeEntity("Самовар и баранки", "ул. Металлистов, 4", 2),
        CafeEntity("Оружейная", "ул. Советская, 47", 3),
    ),
}
