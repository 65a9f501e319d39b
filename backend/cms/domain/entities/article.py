"""Domain entity for articles as they are kept in storage."""

from dataclasses import dataclass, field


@dataclass
class ArticleSection:
    title: str
    content: str


@dataclass
class ArticleContent:
    """Structured article body. Only the introduction is part of the public shape."""

    introduction: str
    sections: list[ArticleSection] = field(default_factory=list)
    conclusion: str = ""


@dataclass
class Article:
    """Core domain entity representing a stored article."""

    title: str
    description: str
    author: str
    category: str
    date: str
    tags: list[str] = field(default_factory=list)
    hero_image: str | None = None
    content: ArticleContent | None = None
    id: int | None = None

    def update(
        self,
        title: str | None = None,
        description: str | None = None,
        date: str | None = None,
        author: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
        hero_image: str | None = None,
        introduction: str | None = None,
    ) -> None:
        """Shallow merge: every non-None argument overrides the stored value.

        A new introduction replaces only that part of the content; sections
        and conclusion carry over.
        """
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if date is not None:
            self.date = date
        if author is not None:
            self.author = author
        if category is not None:
            self.category = category
        if tags is not None:
            self.tags = list(tags)
        if hero_image is not None:
            self.hero_image = hero_image
        if introduction is not None:
            previous = self.content
            self.content = ArticleContent(
                introduction=introduction,
                sections=previous.sections if previous else [],
                conclusion=previous.conclusion if previous else "",
            )
