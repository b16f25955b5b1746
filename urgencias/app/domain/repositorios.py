from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from urgencias.app.domain.departamentos import Departamento
from urgencias.app.domain.informes import Asignacion, Informe
from urgencias.app.domain.periodos import PeriodoGuardia
from urgencias.app.domain.personas import Paciente, Profesional
# Los casos de uso dependen de estos contratos, no de la implementación en memoria.


class RepositorioProfesionales(ABC):
    """
    Contrato (interfaz) para repositorios de profesionales.

    ABC + abstractmethod:
    - ABC: marca la clase como base abstracta (no debe instanciarse directamente).
    - abstractmethod: obliga a implementaciones concretas (memoria, SQLite, API) a implementar estos métodos.
    """

    @abstractmethod
    def guardar(self, profesional: Profesional) -> None:
        """Inserta o sustituye por id (gana la última escritura)."""
        raise NotImplementedError

    @abstractmethod
    def obtener(self, profesional_id: str) -> Profesional:
        """Devuelve el profesional o lanza NoEncontradoError."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, profesional_id: str) -> Optional[Profesional]:
        raise NotImplementedError

    @abstractmethod
    def listar_todos(self) -> List[Profesional]:
        raise NotImplementedError

    @abstractmethod
    def listar_por_especialidad(self, especialidad: str) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def listar_en_servicio(self, especialidad: str, periodo: PeriodoGuardia) -> List[str]:
        raise NotImplementedError


class RepositorioPacientes(ABC):
    """Contrato para repositorios de pacientes."""

    @abstractmethod
    def registrar(self, paciente: Paciente) -> Paciente:
        """Alta idempotente: si el código fiscal existe devuelve el registro guardado."""
        raise NotImplementedError

    @abstractmethod
    def obtener(self, codigo_fiscal: str) -> Paciente:
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, codigo_fiscal: str) -> Optional[Paciente]:
        raise NotImplementedError

    @abstractmethod
    def listar_todos(self) -> List[Paciente]:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        """Número de pacientes registrados."""
        raise NotImplementedError


class RepositorioDepartamentos(ABC):
    """Contrato para repositorios de departamentos."""

    @abstractmethod
    def guardar(self, departamento: Departamento) -> None:
        raise NotImplementedError

    @abstractmethod
    def obtener(self, nombre: str) -> Departamento:
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, nombre: str) -> Optional[Departamento]:
        raise NotImplementedError

    @abstractmethod
    def listar_nombres(self) -> List[str]:
        """Nombres en orden de alta; NoEncontradoError si no hay ninguno."""
        raise NotImplementedError


class RepositorioInformes(ABC):
    """Contrato para el almacén de informes (solo inserción)."""

    @abstractmethod
    def crear(self, profesional_id: str, codigo_fiscal: str, fecha: str, descripcion: str) -> Informe:
        """Asigna el siguiente id secuencial y devuelve el informe guardado."""
        raise NotImplementedError

    @abstractmethod
    def obtener(self, informe_id: str) -> Informe:
        raise NotImplementedError

    @abstractmethod
    def listar_por_paciente(self, codigo_fiscal: str) -> List[Informe]:
        raise NotImplementedError


class RepositorioAsignaciones(ABC):
    """Contrato para el historial de asignaciones paciente -> profesional."""

    @abstractmethod
    def registrar(self, asignacion: Asignacion) -> None:
        raise NotImplementedError

    @abstractmethod
    def profesional_de(self, codigo_fiscal: str) -> Optional[str]:
        raise NotImplementedError
