"""Filtered, paged searches compiled to SQL and run against SQLite."""
from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy import select

from mototrack.filters.predicates import ContainsIgnoreCase
from mototrack.models import Filial, Moto, Usuario
from mototrack.schemas.filtering import (
    AgendamentoFilter,
    EventoFilter,
    FilialFilter,
    MotoFilter,
    UsuarioFilter,
)
from mototrack.schemas.pagination import PageRequest, SortOrder
from mototrack.services import (
    AgendamentoService,
    EventoService,
    FilialService,
    MotoService,
    UsuarioService,
)


def placas(page):
    return [item.placa for item in page.items]


class TestFilialSearch:
    @pytest.mark.asyncio
    async def test_name_substring_ignores_case(self, db_session, seeded):
        page = await FilialService(db_session).search(FilialFilter(nome="lap"), PageRequest())
        assert [f.nome for f in page.items] == ["Filial Lapa", "LAPA Centro"]
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_state_exact_ignores_case(self, db_session, seeded):
        page = await FilialService(db_session).search(FilialFilter(estado="SP"), PageRequest())
        assert {f.nome for f in page.items} == {"Filial Lapa", "Mooca"}

    @pytest.mark.asyncio
    async def test_empty_filter_returns_everything(self, db_session, seeded):
        page = await FilialService(db_session).search(FilialFilter(), PageRequest())
        assert page.total == 3
        assert page.filters_applied is None


class TestMotoSearch:
    @pytest.mark.asyncio
    async def test_status_ignores_case(self, db_session, seeded):
        page = await MotoService(db_session).search(MotoFilter(status="DISPONIVEL"), PageRequest())
        assert placas(page) == ["ABC1234", "POP1100"]

    @pytest.mark.asyncio
    async def test_constraints_are_combined(self, db_session, seeded):
        page = await MotoService(db_session).search(MotoFilter(marca="honda", ano_min=2023), PageRequest())
        assert placas(page) == ["POP1100"]

    @pytest.mark.asyncio
    async def test_year_range(self, db_session, seeded):
        page = await MotoService(db_session).search(MotoFilter(ano_min=2019, ano_max=2022), PageRequest())
        assert placas(page) == ["ABC1234", "XYZ9876"]

    @pytest.mark.asyncio
    async def test_related_filial(self, db_session, seeded):
        filial_id = seeded.filiais.lapa.id
        page = await MotoService(db_session).search(MotoFilter(filial_id=filial_id), PageRequest())
        assert placas(page) == ["ABC1234", "XYZ9876"]

    @pytest.mark.asyncio
    async def test_related_filial_without_motos(self, db_session, seeded):
        page = await MotoService(db_session).search(
            MotoFilter(filial_id=seeded.filiais.mooca.id), PageRequest()
        )
        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0

    @pytest.mark.asyncio
    async def test_creation_date_covers_the_whole_day(self, db_session, seeded):
        page = await MotoService(db_session).search(
            MotoFilter(data_criacao_inicio=date(2025, 1, 10), data_criacao_fim=date(2025, 1, 10)),
            PageRequest(),
        )
        assert placas(page) == ["ABC1234", "XYZ9876"]

    @pytest.mark.asyncio
    async def test_page_metadata(self, db_session, seeded):
        page = await MotoService(db_session).search(
            MotoFilter(placa="  ", status="disponivel"), PageRequest(page=0, size=1)
        )
        assert page.total == 2
        assert page.total_pages == 2
        assert page.has_next is True
        assert page.has_prev is False
        assert page.sort == ["placa,asc"]
        assert page.filters_applied == {"status": "disponivel"}

    @pytest.mark.asyncio
    async def test_last_page(self, db_session, seeded):
        page = await MotoService(db_session).search(MotoFilter(), PageRequest(page=1, size=2))
        assert placas(page) == ["XYZ9876"]
        assert page.has_next is False
        assert page.has_prev is True

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, db_session, seeded):
        page = await MotoService(db_session).search(MotoFilter(), PageRequest(page=5, size=2))
        assert page.items == []
        assert page.total == 3

    @pytest.mark.asyncio
    async def test_explicit_sort(self, db_session, seeded):
        page = await MotoService(db_session).search(
            MotoFilter(), PageRequest(sort=[SortOrder(field="ano", direction="desc")])
        )
        assert placas(page) == ["POP1100", "ABC1234", "XYZ9876"]
        assert page.sort == ["ano,desc"]

    @pytest.mark.asyncio
    async def test_sort_ties_break_on_id(self, db_session, seeded):
        page = await MotoService(db_session).search(
            MotoFilter(), PageRequest(sort=[SortOrder(field="marca")])
        )
        assert placas(page) == ["ABC1234", "POP1100", "XYZ9876"]


class TestUsuarioSearch:
    @pytest.mark.asyncio
    async def test_filial_and_profile(self, db_session, seeded):
        lapa = seeded.filiais.lapa
        db_session.add_all([
            Usuario(nome="Ana", email="ana@mototrack.com", senha="x", perfil="GESTOR", filial_id=lapa.id),
            Usuario(nome="Bruno", email="bruno@mototrack.com", senha="x", perfil="OPERADOR", filial_id=lapa.id),
            Usuario(nome="Carla", email="carla@mototrack.com", senha="x", perfil="gestor", filial_id=None),
        ])
        await db_session.flush()

        service = UsuarioService(db_session)
        gestores = await service.search(UsuarioFilter(perfil="Gestor"), PageRequest())
        assert [u.nome for u in gestores.items] == ["Ana", "Carla"]

        on_lapa = await service.search(UsuarioFilter(filial_id=lapa.id, perfil="gestor"), PageRequest())
        assert [u.nome for u in on_lapa.items] == ["Ana"]


class TestEventoSearch:
    @pytest.mark.asyncio
    async def test_date_range_uses_event_timestamp(self, db_session, seeded):
        page = await EventoService(db_session).search(
            EventoFilter(data_inicio=date(2025, 6, 1), data_fim=date(2025, 6, 1)), PageRequest()
        )
        # newest first by default
        assert [e.tipo for e in page.items] == ["Entrada", "Saida"]

    @pytest.mark.asyncio
    async def test_by_moto(self, db_session, seeded):
        page = await EventoService(db_session).search(
            EventoFilter(moto_id=seeded.motos.fazer.id), PageRequest()
        )
        assert [e.motivo for e in page.items] == ["Troca de oleo"]

    @pytest.mark.asyncio
    async def test_null_location_never_matches(self, db_session, seeded):
        page = await EventoService(db_session).search(EventoFilter(localizacao="patio"), PageRequest())
        assert page.total == 2


class TestAgendamentoSearch:
    @pytest.mark.asyncio
    async def test_wildcards_in_values_are_literal(self, db_session, seeded):
        page = await AgendamentoService(db_session).search(
            AgendamentoFilter(descricao="100%"), PageRequest()
        )
        assert [a.descricao for a in page.items] == ["Troca de pneu 100%"]

        page = await AgendamentoService(db_session).search(
            AgendamentoFilter(descricao="_"), PageRequest()
        )
        assert page.total == 0

    @pytest.mark.asyncio
    async def test_scheduled_date_lower_bound(self, db_session, seeded):
        page = await AgendamentoService(db_session).search(
            AgendamentoFilter(data_inicio=date(2030, 3, 16)), PageRequest()
        )
        assert [a.descricao for a in page.items] == ["Troca de pneu 100%"]

    @pytest.mark.asyncio
    async def test_default_sort_is_scheduled_date(self, db_session, seeded):
        page = await AgendamentoService(db_session).search(AgendamentoFilter(), PageRequest())
        assert page.sort == ["dataAgendada,asc"]
        assert [a.descricao for a in page.items] == ["Revisao geral", "Troca de pneu 100%"]


class TestAccentedValues:
    @pytest_asyncio.fixture
    async def accented(self, db_session):
        filial = Filial(nome="SÃO PAULO NORTE", bairro="Santana", cidade="São Paulo", estado="SP")
        db_session.add(filial)
        await db_session.flush()
        db_session.add_all([
            Moto(placa="ACE0001", modelo="CG 160", marca="Honda", ano=2022, status="DISPONÍVEL", filial_id=filial.id),
            Moto(placa="ACE0002", modelo="Biz", marca="Honda", ano=2021, status="EM_MANUTENÇÃO", filial_id=filial.id),
        ])
        await db_session.flush()
        return filial

    @pytest.mark.asyncio
    async def test_exact_match_folds_accented_letters(self, db_session, accented):
        page = await MotoService(db_session).search(MotoFilter(status="disponível"), PageRequest())
        assert placas(page) == ["ACE0001"]

    @pytest.mark.asyncio
    async def test_exact_match_with_accented_query(self, db_session, accented):
        page = await MotoService(db_session).search(MotoFilter(status="em_manutenção"), PageRequest())
        assert placas(page) == ["ACE0002"]

    @pytest.mark.asyncio
    async def test_substring_folds_accented_letters(self, db_session, accented):
        page = await FilialService(db_session).search(FilialFilter(nome="são"), PageRequest())
        assert [f.nome for f in page.items] == ["SÃO PAULO NORTE"]

    @pytest.mark.asyncio
    async def test_sql_and_in_memory_agree(self, db_session, accented):
        predicate = ContainsIgnoreCase(("status",), "NÍV")
        rows = (await db_session.execute(select(Moto).where(predicate.compile(Moto)))).scalars().all()

        assert [m.placa for m in rows] == ["ACE0001"]
        assert all(predicate.matches(m) for m in rows)
