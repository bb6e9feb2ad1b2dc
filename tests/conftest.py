"""
Shared fixtures.

Provides:
- An in-memory SQLite database (aiosqlite) with all tables created
- Sessions bound to it
- An httpx client talking to the ASGI app, with ``get_db`` overridden
"""
from datetime import datetime
from types import SimpleNamespace

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from mototrack.db.database import create_engine, get_db, init_db
from mototrack.main import create_app
from mototrack.models import Agendamento, Evento, Filial, Moto

# One shared connection so every session sees the same in-memory database
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def test_engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_maker):
    """Client whose requests each get their own session, committed like ``get_db``."""
    app = create_app()

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded(db_session):
    """Two filiais, three motos, events and schedules with known values."""
    lapa = Filial(nome="Filial Lapa", bairro="Lapa", cidade="Sao Paulo", estado="SP", cep="05042-000")
    centro = Filial(nome="LAPA Centro", bairro="Centro", cidade="Curitiba", estado="PR", cep="80010-000")
    mooca = Filial(nome="Mooca", bairro="Mooca", cidade="Sao Paulo", estado="sp", cep="03101-000")
    db_session.add_all([lapa, centro, mooca])
    await db_session.flush()

    cg = Moto(placa="ABC1234", modelo="CG 160", marca="Honda", ano=2022, status="Disponivel",
              filial_id=lapa.id, data_criacao=datetime(2025, 1, 10, 8, 30))
    fazer = Moto(placa="XYZ9876", modelo="Fazer 250", marca="Yamaha", ano=2019, status="Manutencao",
                 filial_id=lapa.id, data_criacao=datetime(2025, 1, 10, 23, 59))
    pop = Moto(placa="POP1100", modelo="Pop 110i", marca="Honda", ano=2024, status="disponivel",
               filial_id=None, data_criacao=datetime(2025, 1, 11, 0, 0))
    db_session.add_all([cg, fazer, pop])
    await db_session.flush()

    eventos = [
        Evento(moto_id=cg.id, tipo="Saida", motivo="Entrega zona sul",
               data_hora=datetime(2025, 6, 1, 0, 0), localizacao="Patio Lapa"),
        Evento(moto_id=cg.id, tipo="Entrada", motivo="Retorno de entrega",
               data_hora=datetime(2025, 6, 1, 23, 59, 59), localizacao="Patio Lapa"),
        Evento(moto_id=fazer.id, tipo="Manutencao", motivo="Troca de oleo",
               data_hora=datetime(2025, 6, 2, 9, 0), localizacao=None),
    ]
    agendamentos = [
        Agendamento(moto_id=fazer.id, data_agendada=datetime(2030, 3, 15, 10, 0), descricao="Revisao geral"),
        Agendamento(moto_id=cg.id, data_agendada=datetime(2030, 3, 16, 8, 0), descricao="Troca de pneu 100%"),
    ]
    db_session.add_all(eventos + agendamentos)
    await db_session.flush()

    return SimpleNamespace(
        filiais=SimpleNamespace(lapa=lapa, centro=centro, mooca=mooca),
        motos=SimpleNamespace(cg=cg, fazer=fazer, pop=pop),
        eventos=eventos,
        agendamentos=agendamentos,
    )


@pytest_asyncio.fixture
async def make_filial(client):
    async def _make(**overrides):
        payload = {"nome": "Filial Lapa", "bairro": "Lapa", "cidade": "São Paulo", "estado": "SP", **overrides}
        response = await client.post("/filiais", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest_asyncio.fixture
async def make_moto(client):
    async def _make(**overrides):
        payload = {
            "placa": "ABC1234",
            "modelo": "CG 160",
            "marca": "Honda",
            "ano": 2022,
            "status": "Disponível",
            **overrides,
        }
        response = await client.post("/motos", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
