from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mototrack.db.database import Base


class Agendamento(Base):
    """Planned maintenance or future event for a moto."""

    __tablename__ = "tb_agendamento"

    id = Column("id_agendamento", Integer, primary_key=True, index=True)
    moto_id = Column("id_moto", Integer, ForeignKey("tb_moto.id_moto"), nullable=False, index=True)
    data_agendada = Column("dt_agendada", DateTime, nullable=False)
    descricao = Column("ds_descricao", String(255), nullable=False)
    data_criacao = Column("dt_criacao", DateTime, default=datetime.now, nullable=False)

    moto = relationship("Moto")

    def __repr__(self) -> str:
        return f"<Agendamento(id={self.id}, moto_id={self.moto_id}, data_agendada={self.data_agendada})>"
