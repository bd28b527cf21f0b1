class RegionalRiotapiHosts:
    """Platform <=references=> Host <=references=> Routing cluster; platform codes are matched case-insensitively"""
    __hosts = {
        "br1.api.riotgames.com":  {'platforms': ["br1"],         'cluster': "americas"},
        "la1.api.riotgames.com":  {'platforms': ["la1", "lan"],  'cluster': "americas"},
        "la2.api.riotgames.com":  {'platforms': ["la2", "las"],  'cluster': "americas"},
        "na1.api.riotgames.com":  {'platforms': ["na1", "na"],   'cluster': "americas"},
        "oc1.api.riotgames.com":  {'platforms': ["oc1", "oce"],  'cluster': "americas"},
        "eun1.api.riotgames.com": {'platforms': ["eun1", "eune"], 'cluster': "europe"},
        "euw1.api.riotgames.com": {'platforms': ["euw1", "euw"], 'cluster': "europe"},
        "tr1.api.riotgames.com":  {'platforms': ["tr1", "tr"],   'cluster': "europe"},
        "ru.api.riotgames.com":   {'platforms': ["ru"],          'cluster': "europe"},
        "kr.api.riotgames.com":   {'platforms': ["kr"],          'cluster': "asia"},
        "jp1.api.riotgames.com":  {'platforms': ["jp1", "jp"],   'cluster': "asia"},
    }
    DEFAULT_HOST = "na1.api.riotgames.com"
    DEFAULT_CLUSTER = "americas"

    def __find(self, region):
        platform = (region or '').strip().lower()
        return next(((host, ref) for host, ref in self.__hosts.items() if platform in ref['platforms']), None)

    def get_host_by_region(self, region):
        """Unknown regions are served by the default (NA) platform host"""
        match = self.__find(region)
        return match[0] if match else self.DEFAULT_HOST

    def get_cluster_by_region(self, region):
        """Routing cluster for regional (account-v1, match-v5) endpoints"""
        match = self.__find(region)
        return match[1]['cluster'] if match else self.DEFAULT_CLUSTER

    def get_cluster_host_by_region(self, region):
        return "{}.api.riotgames.com".format(self.get_cluster_by_region(region))

    def get_platforms(self):
        return [ref['platforms'][0] for ref in self.__hosts.values()]
