"""
Boxoffice - Tableau de bord box-office des films indiens.

Ce package scrape le classement box-office de Sacnilk, l'enrichit avec les
métadonnées TMDB et sert le résultat en JSON au front end.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, erreurs)
- services/ : Couche application (estimation, cache, fusion, vues client)
- adapters/ : Couche infrastructure (scraping, cache mémoire, TMDB, CLI)
- web/ : API FastAPI
"""
