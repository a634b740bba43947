""" Litter Production object """

from .cn_pool import CarbonNitrogenTuple


class Litter(object):
    """ Turnover litter of the living trees

    Litter production for each compartment is assumed to be proportional to
    its biomass; foliage and fine roots go to the labile, branches and coarse
    roots to the refractory soil input. None of it becomes a snag.
    """
    def calculate_litter(self, snag, trees):
        """ route this year's turnover litter of 'trees' into 'snag'

        Parameters:
        -----------
        snag : Snag
            snag pools of the resource unit
        trees : list
            living trees (Tree objects)

        Returns:
        --------
        litter : CarbonNitrogenTuple
            biomass and N routed [kg/ha]
        """
        litter = CarbonNitrogenTuple()
        for tree in trees:
            sp = tree.species
            foliage = sp.turnover_leaf * tree.foliage_mass
            fine_root = sp.turnover_root * tree.fine_root_mass
            wood = sp.turnover_branch * (tree.branch_mass +
                                         tree.coarse_root_mass)

            snag.add_turnover_litter(sp, foliage, fine_root)
            snag.add_turnover_wood(sp, wood)

            litter.add_biomass(foliage, sp.cn_foliage)
            litter.add_biomass(fine_root, sp.cn_fine_root)
            litter.add_biomass(wood, sp.cn_wood)

        return litter
