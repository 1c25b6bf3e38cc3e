# SPDX-License-Identifier: MIT

from worklog.model.taxonomy import Taxonomy


def get_default_taxonomy() -> Taxonomy:
    return {
        "UNITS": ["CJ", "NLC"],
        "ACTIVITIES": [
            "Interação Whatsapp",
            "Interação Email",
            "Interação Telefone",
            "Reunião interna do órgão",
            "Reunião externa",
            "Estudos temáticos",
            "Participação em Comitê ou Comissão",
            "CIACON",
            "CEAI",
            "CGGDIESP",
            "CONEXÕES - GERAL",
            "CONEXÕES - COORD",
        ],
        "INTERACTIONS": [
            "Parecer",
            "Cota",
            "Despacho",
            "Nota Técnica",
            "Informações em MS",
            "Outras minutas",
        ],
        "COUNTERPARTIES": [
            "Colegas CJ",
            "Expediente CJ",
            "Sub Consultoria",
            "SubConsultoria_grupo_NLC",
            "Julio",
            "UGP_SP_Mais_Digital",
            "Fenili",
            "Andrea",
            "Equipes_Fenili&Andrea",
            "Gabinete SGGD",
            "Outros",
            "ColegasOutrasUnidades",
            "Joao - Sub Gov Digital",
            "Equipe do Joao - Sub Gov Digital",
            "Eva - Sub Gestão de Pessoas",
            "Equipe da Eva - Sub Gestão de Pessoas",
            "AJG",
            "Elaine - Ouvidora PGE",
            "Paulo - Sub Patrimônio",
            "Equipe do Paulo - Sub Patrimônio",
        ],
        "DURATIONS": [
            "Até 5 min",
            "5 a 15 min",
            "15 a 30 min",
            "30 a 45 min",
            "45 a 60 min",
            "60 a 90 min",
            "Mais de 90 min",
            "Mais de 120 min",
            "Mais de 180 min",
            "Outro (especificar)",
        ],
    }
