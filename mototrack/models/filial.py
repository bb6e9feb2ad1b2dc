from sqlalchemy import Column, Float, Integer, String

from mototrack.db.database import Base


class Filial(Base):
    """Branch (patio) where motos are parked and users work."""

    __tablename__ = "tb_filial"

    id = Column("id_filial", Integer, primary_key=True, index=True)
    nome = Column("nm_filial", String(120), nullable=False)
    endereco = Column("ds_endereco", String(255), nullable=True)
    bairro = Column("ds_bairro", String(120), nullable=True)
    cidade = Column("ds_cidade", String(120), nullable=True)
    estado = Column("ds_estado", String(60), nullable=True)
    cep = Column("nr_cep", String(20), nullable=True)
    latitude = Column("vl_latitude", Float, nullable=True)
    longitude = Column("vl_longitude", Float, nullable=True)
    raio_geofence_metros = Column("raio_geofence_m", Float, nullable=True)

    def __repr__(self) -> str:
        return f"<Filial(id={self.id}, nome={self.nome!r})>"
