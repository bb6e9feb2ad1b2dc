from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mototrack.db.database import Base


class Usuario(Base):
    __tablename__ = "tb_usuario"

    id = Column("id_usuario", Integer, primary_key=True, index=True)
    nome = Column("nm_usuario", String(120), nullable=False)
    email = Column("ds_email", String(255), unique=True, nullable=False)
    # bcrypt hash, never the plain password
    senha = Column("ds_senha", String(255), nullable=False)
    perfil = Column("tp_perfil", String(40), nullable=False)
    filial_id = Column("id_filial", Integer, ForeignKey("tb_filial.id_filial"), nullable=True, index=True)

    filial = relationship("Filial")

    def __repr__(self) -> str:
        return f"<Usuario(id={self.id}, email={self.email!r}, perfil={self.perfil!r})>"
