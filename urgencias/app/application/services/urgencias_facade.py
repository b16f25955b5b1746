# application/services/urgencias_facade.py
"""
Punto de entrada único del motor de urgencias.

Todas las operaciones se ejecutan bajo un único RLock: un host con varios
llamadores ve cada operación (p. ej. ocupar cama + cambiar estado) como
atómica.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from urgencias.app.application.csv.csv_io import FuenteCsv
from urgencias.app.application.csv.csv_service import ImportadorCsv
from urgencias.app.container import AppContainer, build_container
from urgencias.app.domain.departamentos import Departamento
from urgencias.app.domain.enums import EstadoPaciente, ResultadoVerificacion
from urgencias.app.domain.informes import Informe
from urgencias.app.domain.periodos import PeriodoGuardia
from urgencias.app.domain.personas import Paciente, Profesional


class UrgenciasFacade:
    def __init__(self, container: Optional[AppContainer] = None) -> None:
        self._c = container or build_container()
        self._lock = threading.RLock()
        self._importador = ImportadorCsv(self._c)

    # --------------------------------------------------------------
    # Profesionales
    # --------------------------------------------------------------

    def add_profesional(self, id: str, nombre: str, apellidos: str, especialidad: str, periodo: str) -> None:
        profesional = Profesional.nuevo(id, nombre, apellidos, especialidad, periodo)
        with self._lock:
            self._c.profesionales_repo.guardar(profesional)

    def get_profesional(self, id: str) -> Profesional:
        with self._lock:
            return self._c.profesionales_repo.obtener(id)

    def get_profesionales(self, especialidad: str) -> List[str]:
        with self._lock:
            return self._c.profesionales_repo.listar_por_especialidad(especialidad)

    def get_profesionales_en_servicio(self, especialidad: str, periodo: str) -> List[str]:
        consulta = PeriodoGuardia.desde_texto(periodo)
        with self._lock:
            return self._c.profesionales_repo.listar_en_servicio(especialidad, consulta)

    def importar_profesionales(self, fuente: Optional[FuenteCsv]) -> int:
        with self._lock:
            return self._importador.importar_profesionales(fuente)

    # --------------------------------------------------------------
    # Departamentos
    # --------------------------------------------------------------

    def add_departamento(self, nombre: str, max_pacientes: int) -> None:
        departamento = Departamento.nuevo(nombre, max_pacientes)
        with self._lock:
            self._c.departamentos_repo.guardar(departamento)

    def get_departamento(self, nombre: str) -> Departamento:
        with self._lock:
            return self._c.departamentos_repo.obtener(nombre)

    def get_departamentos(self) -> List[str]:
        with self._lock:
            return self._c.departamentos_repo.listar_nombres()

    def importar_departamentos(self, fuente: Optional[FuenteCsv]) -> int:
        with self._lock:
            return self._importador.importar_departamentos(fuente)

    # --------------------------------------------------------------
    # Pacientes
    # --------------------------------------------------------------

    def add_paciente(
        self,
        codigo_fiscal: str,
        nombre: str,
        apellidos: str,
        fecha_nacimiento: str,
        motivo: str,
        fecha_admision: str,
    ) -> Paciente:
        with self._lock:
            return self._c.usecases.registrar_paciente.ejecutar(
                codigo_fiscal, nombre, apellidos, fecha_nacimiento, motivo, fecha_admision
            )

    def get_paciente(self, identificador: str) -> List[Paciente]:
        with self._lock:
            return self._c.usecases.buscar_pacientes.ejecutar(identificador)

    def get_pacientes_por_fecha(self, fecha: str) -> List[str]:
        with self._lock:
            return self._c.usecases.codigos_por_fecha.ejecutar(fecha)

    def ingresar_o_dar_alta(self, codigo_fiscal: str, nombre_departamento: str) -> EstadoPaciente:
        with self._lock:
            return self._c.usecases.ingresar_o_dar_alta.ejecutar(codigo_fiscal, nombre_departamento)

    def verificar_paciente(self, codigo_fiscal: str) -> ResultadoVerificacion:
        with self._lock:
            return self._c.usecases.verificar_paciente.ejecutar(codigo_fiscal)

    # --------------------------------------------------------------
    # Asignaciones e informes
    # --------------------------------------------------------------

    def asignar_paciente_a_profesional(self, codigo_fiscal: str, especialidad: str) -> str:
        with self._lock:
            return self._c.usecases.asignar_profesional.ejecutar(codigo_fiscal, especialidad)

    def guardar_informe(self, profesional_id: str, codigo_fiscal: str, fecha: str, descripcion: str) -> Informe:
        with self._lock:
            return self._c.usecases.guardar_informe.ejecutar(profesional_id, codigo_fiscal, fecha, descripcion)

    # --------------------------------------------------------------
    # Estadísticas
    # --------------------------------------------------------------

    def numero_pacientes(self) -> int:
        with self._lock:
            return self._c.estadisticas.numero_pacientes()

    def numero_pacientes_por_fecha(self, fecha: str) -> int:
        with self._lock:
            return self._c.estadisticas.numero_pacientes_por_fecha(fecha)

    def numero_hospitalizados_en_departamento(self, nombre_departamento: str) -> int:
        with self._lock:
            return self._c.estadisticas.numero_hospitalizados_en_departamento(nombre_departamento)

    def capacidad_departamento(self, nombre_departamento: str) -> int:
        with self._lock:
            return self._c.estadisticas.capacidad_departamento(nombre_departamento)

    def numero_dados_de_alta(self) -> int:
        with self._lock:
            return self._c.estadisticas.numero_dados_de_alta()

    def numero_dados_de_alta_por_especialidad(self, especialidad: str) -> int:
        with self._lock:
            return self._c.estadisticas.numero_dados_de_alta_por_especialidad(especialidad)
