"""
Couche services applicatifs (cas d'utilisation).

Les services orchestrent la logique du domaine :
- layout / episode_identity / nfo_resolver / file_list : moteur de
  décomposition des season packs
- season_pack : décomposition complète d'un pack en épisodes
- release_processor : envoi des releases et épisodes vers CrowdNFO
- category, hash_service, post_processing : traitements annexes

Les services dépendent des ports (interfaces) de core/, jamais des
implémentations concrètes de adapters/.
"""
