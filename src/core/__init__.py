"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites) et exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Entités métier (BoxOfficeRecord, DayPoint, MetadataRecord, MergedMovie)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors : Taxonomie des erreurs (FetchFailure, MetadataUnavailable, NoCacheAvailable)
"""
