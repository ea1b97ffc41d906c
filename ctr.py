import numpy as np

"""
Click Through Rate (CTR) of a person for an advertiser

- the base CTR depends on the parity of the advertiser's name length:
  even => 1.5 * number of vowels in the person's name
  odd  => 1.0 * number of consonants in the person's name
- if both name lengths share a factor besides 1, the CTR is increased by 50%

Only ascii letters are counted, anything else (spaces, digits...) is ignored.
"""

VOWELS = "aeiou"
VOWEL_WEIGHT = 1.5
CONSONANT_WEIGHT = 1.0
FACTOR_BONUS = 1.5


def count_letters(name):
    nb_vowels, nb_consonants = 0, 0
    for c in name:
        if not (c.isascii() and c.isalpha()):
            continue
        if c.lower() in VOWELS:
            nb_vowels += 1
        else:
            nb_consonants += 1
    return nb_vowels, nb_consonants


"""positive divisors of n, empty for n = 0"""


def get_factors(n):
    factors = []
    for f in range(1, int(np.sqrt(n)) + 1):
        if n % f == 0:
            factors.append(f)
            # don't add the square root twice
            if f != n // f:
                factors.append(n // f)
    return factors


def share_factor(n, m):
    common = set(get_factors(n)) & set(get_factors(m))
    common.discard(1)
    return len(common) > 0


def ctr(person, advertiser):
    nb_vowels, nb_consonants = count_letters(person)

    if len(advertiser) % 2 == 0:
        result = VOWEL_WEIGHT * nb_vowels
    else:
        result = CONSONANT_WEIGHT * nb_consonants

    # bonus applied once, however many factors are shared
    if share_factor(len(person), len(advertiser)):
        result *= FACTOR_BONUS

    return float(result)


"""
matrix of CTR, ctr_matrix[a, p] = ctr(people[p], advertisers[a])
(same layout as logpop[position, student] in the simulations)
"""


def generate_ctr(people, advertisers):
    nb_advertisers, nb_people = len(advertisers), len(people)
    ctr_matrix = np.zeros((nb_advertisers, nb_people))
    for a in range(nb_advertisers):
        for p in range(nb_people):
            ctr_matrix[a, p] = ctr(people[p], advertisers[a])
    return ctr_matrix


"""
rank all people by decreasing CTR for one advertiser,
sorted() is stable so equal CTRs keep the input order of people
"""


def rank_pref(ctr_row):
    n = len(ctr_row)
    result = sorted(range(n), key=lambda i: -ctr_row[i])
    return result


def preference_profile(ctr_matrix):
    nb_advertisers = ctr_matrix.shape[0]
    prefA = [rank_pref(ctr_matrix[a, :]) for a in range(nb_advertisers)]
    return prefA
