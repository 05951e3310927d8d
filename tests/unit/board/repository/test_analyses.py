"""
Testes do AnalysisRepository.

Usa SQLite (aiosqlite) em arquivo temporario com o mesmo modelo
declarativo usado no PostgreSQL.
"""

import pytest
import pytest_asyncio

from projects.board.models import Analysis
from projects.board.repository import AnalysisRepository
from projects.board.roles import Role
from shared.core.exceptions import StorageException
from shared.db.session import create_engine_and_session_maker, create_schema


@pytest_asyncio.fixture
async def engine_and_maker(tmp_path):
    engine, session_maker = create_engine_and_session_maker(
        f"sqlite+aiosqlite:///{tmp_path / 'board.db'}"
    )
    await create_schema(engine)
    yield engine, session_maker
    await engine.dispose()


@pytest.fixture
def repository(engine_and_maker):
    _, session_maker = engine_and_maker
    return AnalysisRepository(session_maker)


def _analysis(user_id=1, idea="App de assinatura de cafe", **overrides) -> Analysis:
    data = dict(
        user_id=user_id,
        idea_text=idea,
        strategist="estrategia",
        financier="financas",
        auditor="riscos",
        analyst="mercado",
        moderator="VEREDITO: SEGUIR",
    )
    data.update(overrides)
    return Analysis(**data)


class TestCreate:
    """Testes de create."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamp(self, repository):
        """create preenche id e created_at na propria entidade."""
        analysis = _analysis()

        saved = await repository.create(analysis)

        assert saved is analysis
        assert analysis.id is not None
        assert analysis.created_at is not None
        assert analysis.is_persisted

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, repository):
        first = await repository.create(_analysis())
        second = await repository.create(_analysis())

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_roles_stored_as_role_content(self, repository, engine_and_maker):
        """Cada coluna de papel guarda {role, content}."""
        from sqlalchemy import select
        from projects.board.db.models import AnalysisRecord

        analysis = await repository.create(_analysis())

        _, session_maker = engine_and_maker
        async with session_maker() as session:
            record = (await session.execute(
                select(AnalysisRecord).where(AnalysisRecord.id == analysis.id)
            )).scalar_one()

        assert record.financier == {"role": "financier", "content": "financas"}
        assert record.moderator == {"role": "moderator", "content": "VEREDITO: SEGUIR"}


class TestGet:
    """Testes de get."""

    @pytest.mark.asyncio
    async def test_get_returns_saved_fields(self, repository):
        saved = await repository.create(_analysis(user_id=42))

        loaded = await repository.get(saved.id)

        assert loaded.id == saved.id
        assert loaded.user_id == 42
        assert loaded.idea_text == "App de assinatura de cafe"
        for role in Role:
            assert loaded.text_for(role) == saved.text_for(role)

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, repository):
        assert await repository.get(12345) is None

    @pytest.mark.asyncio
    async def test_loaded_entities_are_independent(self, repository):
        """Alterar uma entidade retornada nao afeta leituras seguintes."""
        saved = await repository.create(_analysis())

        loaded = await repository.get(saved.id)
        loaded.moderator = "alterado"

        assert (await repository.get(saved.id)).moderator == "VEREDITO: SEGUIR"


class TestList:
    """Testes de list."""

    @pytest.mark.asyncio
    async def test_list_newest_first_with_limit(self, repository):
        """Com 7 analises, limit=5 devolve as 5 mais recentes."""
        ids = [(await repository.create(_analysis(idea=f"ideia {i}"))).id for i in range(7)]

        result = await repository.list(limit=5, offset=0)

        assert [a.id for a in result] == list(reversed(ids))[:5]

    @pytest.mark.asyncio
    async def test_list_offset(self, repository):
        ids = [(await repository.create(_analysis())).id for _ in range(4)]

        result = await repository.list(limit=2, offset=2)

        assert [a.id for a in result] == [ids[1], ids[0]]

    @pytest.mark.asyncio
    async def test_list_clamps_invalid_paging(self, repository):
        """limit <= 0 usa o padrao (10) e offset negativo vira 0."""
        for _ in range(12):
            await repository.create(_analysis())

        result = await repository.list(limit=0, offset=-3)

        assert len(result) == 10

    @pytest.mark.asyncio
    async def test_list_empty(self, repository):
        assert await repository.list() == []

    @pytest.mark.asyncio
    async def test_list_filtered_by_user(self, repository):
        await repository.create(_analysis(user_id=1))
        mine = await repository.create(_analysis(user_id=2))

        result = await repository.list(limit=5, user_id=2)

        assert [a.id for a in result] == [mine.id]


class TestStorageErrors:
    """Erros do banco viram StorageException."""

    @pytest.mark.asyncio
    async def test_missing_table_raises_storage_exception(self, tmp_path):
        engine, session_maker = create_engine_and_session_maker(
            f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}"
        )
        repository = AnalysisRepository(session_maker)

        try:
            with pytest.raises(StorageException):
                await repository.create(_analysis())
            with pytest.raises(StorageException):
                await repository.list()
            with pytest.raises(StorageException):
                await repository.get(1)
        finally:
            await engine.dispose()
