"""
Tests for InMemoryCatalogRepository.

Covers id allocation, slug lookups, category joins, featured/recent
ordering and article search.
"""

from datetime import datetime, timezone

import pytest

from core.storage import ArticleWithCategory, Category


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


async def _category(repository, slug: str = "direito-penal", name: str = "Direito Penal"):
    return await repository.create_category(name=name, slug=slug)


async def _article(repository, slug: str, category_id: int, **overrides):
    fields = {
        "title": f"Artigo {slug}",
        "excerpt": "Resumo",
        "content": "Conteúdo",
        "publish_date": _utc(2025, 5, 1),
    }
    fields.update(overrides)
    return await repository.create_article(slug=slug, category_id=category_id, **fields)


# =========================================
# Ids and creation
# =========================================


@pytest.mark.asyncio
async def test_first_category_gets_id_one(empty_repository):
    category = await _category(empty_repository)

    assert category.id == 1
    assert await empty_repository.get_category_by_slug("direito-penal") == category


@pytest.mark.asyncio
async def test_ids_are_allocated_per_entity_type(empty_repository):
    first = await _category(empty_repository, slug="a")
    second = await _category(empty_repository, slug="b")
    article = await _article(empty_repository, "artigo", first.id)
    solution = await empty_repository.create_solution(
        title="Consultoria",
        description="Fale com um advogado",
        link="/contato",
        link_text="Agendar",
    )
    user = await empty_repository.create_user(username="admin", password="secret")

    assert (first.id, second.id) == (1, 2)
    assert article.id == 1
    assert solution.id == 1
    assert user.id == 1


@pytest.mark.asyncio
async def test_ids_strictly_increase(empty_repository):
    category = await _category(empty_repository)
    articles = [await _article(empty_repository, f"a-{i}", category.id) for i in range(5)]

    ids = [article.id for article in articles]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)
    assert ids[0] == 1


@pytest.mark.asyncio
async def test_optional_fields_default_to_none(empty_repository):
    category = await _category(empty_repository)
    article = await _article(empty_repository, "sem-imagem", category.id)

    assert category.description is None
    assert category.icon_name is None
    assert category.image_url is None
    assert article.image_url is None
    assert article.featured is None


@pytest.mark.asyncio
async def test_naive_publish_date_is_stored_as_utc(empty_repository):
    category = await _category(empty_repository)
    article = await _article(
        empty_repository, "naive", category.id, publish_date=datetime(2025, 5, 1)
    )

    assert article.publish_date == _utc(2025, 5, 1)


@pytest.mark.asyncio
async def test_article_count_includes_seed(seeded_repository):
    seeded = len(await seeded_repository.get_articles())
    category = (await seeded_repository.get_categories())[0]

    await _article(seeded_repository, "extra-1", category.id)
    await _article(seeded_repository, "extra-2", category.id)

    assert len(await seeded_repository.get_articles()) == seeded + 2


# =========================================
# Lookups
# =========================================


@pytest.mark.asyncio
async def test_missing_lookups_return_none(empty_repository):
    assert await empty_repository.get_category_by_slug("nope") is None
    assert await empty_repository.get_category_by_id(99) is None
    assert await empty_repository.get_article_by_slug("nope") is None
    assert await empty_repository.get_article_by_id(99) is None
    assert await empty_repository.get_user(99) is None
    assert await empty_repository.get_user_by_username("nobody") is None


@pytest.mark.asyncio
async def test_user_lookup_by_username(empty_repository):
    user = await empty_repository.create_user(username="editora", password="s3nha")

    assert await empty_repository.get_user(user.id) == user
    assert await empty_repository.get_user_by_username("editora") == user


@pytest.mark.asyncio
async def test_duplicate_slug_returns_first_created(empty_repository):
    first = await _category(empty_repository, slug="dup", name="Primeira")
    await _category(empty_repository, slug="dup", name="Segunda")

    assert await empty_repository.get_category_by_slug("dup") == first


@pytest.mark.asyncio
async def test_article_lookups_are_joined(empty_repository):
    category = await _category(empty_repository)
    article = await _article(empty_repository, "flagrante", category.id)

    by_slug = await empty_repository.get_article_by_slug("flagrante")
    by_id = await empty_repository.get_article_by_id(article.id)

    assert isinstance(by_slug, ArticleWithCategory)
    assert by_slug.category == category
    assert by_id == by_slug


@pytest.mark.asyncio
async def test_unknown_category_joins_as_none(empty_repository):
    article = await _article(empty_repository, "orfao", category_id=404)

    joined = await empty_repository.get_article_by_id(article.id)

    assert joined is not None
    assert joined.category_id == 404
    assert joined.category is None


# =========================================
# Articles by category
# =========================================


@pytest.mark.asyncio
async def test_articles_by_category(empty_repository):
    penal = await _category(empty_repository, slug="direito-penal")
    familia = await _category(empty_repository, slug="direito-familia", name="Família")
    first = await _article(empty_repository, "p1", penal.id)
    await _article(empty_repository, "f1", familia.id)
    second = await _article(empty_repository, "p2", penal.id)

    results = await empty_repository.get_articles_by_category("direito-penal")

    assert [article.id for article in results] == [first.id, second.id]
    assert all(article.category == penal for article in results)


@pytest.mark.asyncio
async def test_articles_by_unknown_category_is_empty(seeded_repository):
    assert await seeded_repository.get_articles_by_category("no-such-slug") == []


# =========================================
# Featured and recent
# =========================================


@pytest.mark.asyncio
async def test_featured_only_returns_featured(empty_repository):
    category = await _category(empty_repository)
    featured = await _article(
        empty_repository, "a", category.id, featured=1, publish_date=_utc(2025, 5, 12)
    )
    await _article(
        empty_repository, "b", category.id, featured=0, publish_date=_utc(2025, 5, 1)
    )
    await _article(empty_repository, "c", category.id, publish_date=_utc(2025, 5, 20))

    results = await empty_repository.get_featured_articles()

    assert [article.id for article in results] == [featured.id]


@pytest.mark.asyncio
async def test_featured_sorted_newest_first(seeded_repository):
    results = await seeded_repository.get_featured_articles()

    assert results
    assert all(article.featured == 1 for article in results)
    dates = [article.publish_date for article in results]
    assert dates == sorted(dates, reverse=True)


@pytest.mark.asyncio
async def test_recent_articles(empty_repository):
    category = await _category(empty_repository)
    a = await _article(empty_repository, "a", category.id, publish_date=_utc(2025, 5, 1))
    b = await _article(empty_repository, "b", category.id, publish_date=_utc(2025, 5, 10))
    await _article(empty_repository, "c", category.id, publish_date=_utc(2025, 4, 20))

    results = await empty_repository.get_recent_articles(2)

    assert [article.id for article in results] == [b.id, a.id]


@pytest.mark.asyncio
async def test_recent_limit_larger_than_total(seeded_repository):
    total = len(await seeded_repository.get_articles())

    results = await seeded_repository.get_recent_articles(total + 10)

    assert len(results) == total
    dates = [article.publish_date for article in results]
    assert dates == sorted(dates, reverse=True)


@pytest.mark.asyncio
async def test_recent_non_positive_limit_is_empty(seeded_repository):
    assert await seeded_repository.get_recent_articles(0) == []
    assert await seeded_repository.get_recent_articles(-1) == []


@pytest.mark.asyncio
async def test_same_publish_date_keeps_creation_order(empty_repository):
    category = await _category(empty_repository)
    same_day = _utc(2025, 5, 5)
    first = await _article(empty_repository, "x", category.id, featured=1, publish_date=same_day)
    second = await _article(empty_repository, "y", category.id, featured=1, publish_date=same_day)

    featured = await empty_repository.get_featured_articles()
    recent = await empty_repository.get_recent_articles(2)

    assert [article.id for article in featured] == [first.id, second.id]
    assert [article.id for article in recent] == [first.id, second.id]


# =========================================
# Search
# =========================================


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["aluguel", "ALUGUEL", "AlUgUeL"])
async def test_search_is_case_insensitive(seeded_repository, query):
    results = await seeded_repository.search_articles(query)

    assert [article.slug for article in results] == ["aluguel-clausulas-abusivas"]


@pytest.mark.asyncio
async def test_search_matches_title_excerpt_or_content(empty_repository):
    category = await _category(empty_repository)
    in_title = await _article(empty_repository, "t", category.id, title="Guarda compartilhada")
    in_excerpt = await _article(empty_repository, "e", category.id, excerpt="Sobre a guarda")
    in_content = await _article(empty_repository, "c", category.id, content="A GUARDA dos filhos")
    await _article(empty_repository, "n", category.id)

    results = await empty_repository.search_articles("guarda")

    assert [article.id for article in results] == [in_title.id, in_excerpt.id, in_content.id]
    assert all(isinstance(article.category, Category) for article in results)


@pytest.mark.asyncio
async def test_empty_query_matches_everything(seeded_repository):
    everything = await seeded_repository.get_articles()

    assert await seeded_repository.search_articles("") == everything


@pytest.mark.asyncio
async def test_search_without_matches(seeded_repository):
    assert await seeded_repository.search_articles("xyzzy-nada") == []


# =========================================
# Lifecycle
# =========================================


@pytest.mark.asyncio
async def test_stats_counts_each_type(empty_repository):
    category = await _category(empty_repository)
    await _article(empty_repository, "a", category.id)

    await empty_repository.setup()

    assert await empty_repository.stats() == {
        "users": 0,
        "categories": 1,
        "articles": 1,
        "solutions": 0,
    }
