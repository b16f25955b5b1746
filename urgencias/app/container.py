from __future__ import annotations

from dataclasses import dataclass

from urgencias.app.application.pacientes_usecases import (
    BuscarPacientes,
    ListarCodigosPorFecha,
    RegistrarPaciente,
)
from urgencias.app.application.usecases.asignar_profesional import AsignarProfesional
from urgencias.app.application.usecases.guardar_informe import GuardarInforme
from urgencias.app.application.usecases.ingresar_o_dar_alta import IngresarODarAlta
from urgencias.app.application.usecases.verificar_paciente import VerificarPaciente
from urgencias.app.infrastructure.memoria.repos_asignaciones import AsignacionesRepository
from urgencias.app.infrastructure.memoria.repos_departamentos import DepartamentosRepository
from urgencias.app.infrastructure.memoria.repos_informes import InformesRepository
from urgencias.app.infrastructure.memoria.repos_pacientes import PacientesRepository
from urgencias.app.infrastructure.memoria.repos_profesionales import ProfesionalesRepository
from urgencias.app.queries.estadisticas_queries import EstadisticasQueries


@dataclass(slots=True)
class UseCasesHub:
    registrar_paciente: RegistrarPaciente
    buscar_pacientes: BuscarPacientes
    codigos_por_fecha: ListarCodigosPorFecha
    ingresar_o_dar_alta: IngresarODarAlta
    verificar_paciente: VerificarPaciente
    asignar_profesional: AsignarProfesional
    guardar_informe: GuardarInforme


@dataclass(slots=True)
class AppContainer:
    profesionales_repo: ProfesionalesRepository
    pacientes_repo: PacientesRepository
    departamentos_repo: DepartamentosRepository
    informes_repo: InformesRepository
    asignaciones_repo: AsignacionesRepository

    usecases: UseCasesHub
    estadisticas: EstadisticasQueries


def build_container() -> AppContainer:
    profesionales_repo = ProfesionalesRepository()
    pacientes_repo = PacientesRepository()
    departamentos_repo = DepartamentosRepository()
    informes_repo = InformesRepository()
    asignaciones_repo = AsignacionesRepository()

    usecases = UseCasesHub(
        registrar_paciente=RegistrarPaciente(pacientes_repo),
        buscar_pacientes=BuscarPacientes(pacientes_repo),
        codigos_por_fecha=ListarCodigosPorFecha(pacientes_repo),
        ingresar_o_dar_alta=IngresarODarAlta(pacientes_repo, departamentos_repo),
        verificar_paciente=VerificarPaciente(pacientes_repo),
        asignar_profesional=AsignarProfesional(pacientes_repo, profesionales_repo, asignaciones_repo),
        guardar_informe=GuardarInforme(profesionales_repo, informes_repo),
    )
    estadisticas = EstadisticasQueries(pacientes_repo, departamentos_repo, profesionales_repo, asignaciones_repo)

    return AppContainer(
        profesionales_repo=profesionales_repo,
        pacientes_repo=pacientes_repo,
        departamentos_repo=departamentos_repo,
        informes_repo=informes_repo,
        asignaciones_repo=asignaciones_repo,
        usecases=usecases,
        estadisticas=estadisticas,
    )
