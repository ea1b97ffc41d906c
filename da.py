"""
advertiser-proposing deferred acceptance
takes as input full preference lists of advertisers and the CTR matrix,
people accept a new advertiser only on a strictly higher CTR
"""

import logging

import ctr as ctr_lib

log = logging.getLogger("admatch.da")


def deferred_acceptance(prefA, ctr_matrix):
    nbAdvertisers, nbPeople = ctr_matrix.shape

    # propA[a] = rank of the next proposal from a
    propA = [0] * nbAdvertisers

    # matchP[p] = tentative match of p
    matchP = [None] * nbPeople

    free = list(range(nbAdvertisers))
    nb_pass = 0
    while len(free) > 0:
        nb_pass += 1
        log.debug("pass %d: %d free advertiser(s)", nb_pass, len(free))

        # every advertiser free at the start of the pass proposes once
        for a in list(free):
            if propA[a] == nbPeople:
                # exhausted, never free again
                free.remove(a)
                continue

            p = prefA[a][propA[a]]
            b = matchP[p]
            if b is None:
                matchP[p] = a
                free.remove(a)
            elif ctr_matrix[a, p] > ctr_matrix[b, p]:
                log.debug("person %d leaves advertiser %d for %d", p, b, a)
                matchP[p] = a
                free.remove(a)
                if propA[b] < nbPeople:
                    free.append(b)
            propA[a] += 1

    return matchP, propA


class Matching:
    """
    Stable matching of people with advertisers.

    People and advertisers are slots (indexes in the input lists), so that
    duplicate names are matched independently.
    """

    def __init__(self, people, advertisers):
        self.people = list(people)
        self.advertisers = list(advertisers)
        self.ctr_matrix = ctr_lib.generate_ctr(self.people, self.advertisers)
        self.prefA = ctr_lib.preference_profile(self.ctr_matrix)
        self.propA = [0] * len(self.advertisers)
        self.matchP = [None] * len(self.people)

    def run(self):
        """Run the propose and reject loop, returns (matchP, total CTR)."""
        self.matchP, self.propA = deferred_acceptance(self.prefA, self.ctr_matrix)

        total = 0.0
        for p, a in enumerate(self.matchP):
            if a is not None:
                total += ctr_lib.ctr(self.people[p], self.advertisers[a])

        log.info(
            "matched %d people out of %d with %d advertisers, total CTR %s",
            self.nb_matched(),
            len(self.people),
            len(self.advertisers),
            total,
        )
        return self.matchP, total

    def nb_matched(self):
        return len(self.matchP) - self.matchP.count(None)

    def pairs(self):
        """(person, advertiser) names of every matched slot, in person order."""
        return [
            (self.people[p], self.advertisers[a])
            for p, a in enumerate(self.matchP)
            if a is not None
        ]

    def as_dict(self):
        # duplicate person names collapse here, use pairs() to keep every slot
        return {person: advertiser for person, advertiser in self.pairs()}

    def matchA(self):
        matchA = [None] * len(self.advertisers)
        for p, a in enumerate(self.matchP):
            if a is not None:
                matchA[a] = p
        return matchA
