from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mototrack.db.database import Base


class Evento(Base):
    """Movement or status change of a moto (entrada, saída, manutenção...)."""

    __tablename__ = "tb_evento"

    id = Column("id_evento", Integer, primary_key=True, index=True)
    moto_id = Column("id_moto", Integer, ForeignKey("tb_moto.id_moto"), nullable=False, index=True)
    tipo = Column("tp_evento", String(40), nullable=False)
    motivo = Column("ds_motivo", String(255), nullable=False)
    data_hora = Column("dt_hr_evento", DateTime, default=datetime.now, nullable=False)
    localizacao = Column("ds_localizacao", String(255), nullable=True)

    moto = relationship("Moto")

    def __repr__(self) -> str:
        return f"<Evento(id={self.id}, moto_id={self.moto_id}, tipo={self.tipo!r})>"
