from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mototrack.db.database import Base


class Moto(Base):
    __tablename__ = "tb_moto"

    id = Column("id_moto", Integer, primary_key=True, index=True)
    placa = Column("cd_placa", String(10), unique=True, nullable=False)
    modelo = Column("ds_modelo", String(80), nullable=False)
    marca = Column("ds_marca", String(80), nullable=False)
    ano = Column("nr_ano", Integer, nullable=False)
    status = Column("ds_status", String(40), nullable=False)
    filial_id = Column("id_filial", Integer, ForeignKey("tb_filial.id_filial"), nullable=True, index=True)
    latitude = Column("vl_latitude", Float, nullable=True)
    longitude = Column("vl_longitude", Float, nullable=True)
    data_criacao = Column("dt_criacao", DateTime, default=datetime.now, nullable=False)

    filial = relationship("Filial")

    def __repr__(self) -> str:
        return f"<Moto(id={self.id}, placa={self.placa!r}, status={self.status!r})>"
