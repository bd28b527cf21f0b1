from lolapi.models import Champion, Summoner, Match, MatchParticipant, MatchTeam
from django.core.exceptions import ObjectDoesNotExist
from django.db import IntegrityError, transaction


class Repository:
    """One idempotent upsert(key, fields) per entity; key is the natural (possibly composite) key as a dict"""
    model = None

    def find(self, **key):
        try:
            return self.model.objects.get(**key)
        except ObjectDoesNotExist:
            return None

    def upsert(self, key, fields):
        matching = self.find(**key)
        if matching is not None:
            return self.__update(matching, fields)
        try:
            # Savepoint, so a lost insert race doesn't break an enclosing transaction
            with transaction.atomic():
                created = self.model(**key, **fields)
                created.save()
            return created
        except IntegrityError:
            # If the row was created by another process, update that one (although it may be exactly same)
            return self.__update(self.model.objects.get(**key), fields)

    def get_or_create(self, key, defaults):
        """Like upsert, but leaves an existing row untouched"""
        matching = self.find(**key)
        if matching is not None:
            return matching
        return self.upsert(key, defaults)

    @staticmethod
    def __update(instance, fields):
        for name, value in fields.items():
            setattr(instance, name, value)
        instance.save()
        return instance


class SummonerRepository(Repository):
    model = Summoner


class MatchRepository(Repository):
    model = Match


class ParticipantRepository(Repository):
    model = MatchParticipant


class TeamRepository(Repository):
    model = MatchTeam


class ChampionRepository(Repository):
    model = Champion
